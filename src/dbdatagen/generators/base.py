"""Base randomizer interface."""

from collections.abc import Callable
from typing import Any, ClassVar

from faker import Faker

from dbdatagen.models import GenerationRequest


def subtype(name: str) -> Callable:
    """
    Mark a CategoryRandomizer method as the generator for a subtype.

    Example:
        >>> class PhoneRandomizer(CategoryRandomizer):
        ...     @subtype("PhoneNumber")
        ...     def phone_number(self, request):
        ...         return self.fake.phone_number()
    """

    def decorator(func: Callable) -> Callable:
        func._subtype_name = name
        return func

    return decorator


class CategoryRandomizer:
    """
    Base class for the subtype generators of one randomizer category.

    Subclasses declare their subtypes with @subtype; the catalog collects
    them into a static table when the class is defined.

    Attributes:
        SUBTYPES: Subtype name (lower-case) → (display name, method name)
    """

    SUBTYPES: ClassVar[dict[str, tuple[str, str]]] = {}

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        table: dict[str, tuple[str, str]] = {}
        for klass in reversed(cls.__mro__):
            for attr, member in vars(klass).items():
                name = getattr(member, "_subtype_name", None)
                if name:
                    table[name.lower()] = (name, attr)
        cls.SUBTYPES = table

    def __init__(self, fake: Faker):
        self.fake = fake

    @property
    def random(self):
        """Random source shared with Faker (honours seed_instance)."""
        return self.fake.random

    def count(self, request: GenerationRequest, default: int = 3) -> int:
        """Sample an item count in [Min, Max], Min clamped to at least 1."""
        low = max(1, int(request.min)) if request.min is not None else None
        high = int(request.max) if request.max is not None else None
        if low is None and high is None:
            return default
        if low is None:
            low = 1
        if high is None or high < low:
            high = low
        return self.random.randint(low, high)

    def length(self, request: GenerationRequest, default_min: int, default_max: int) -> int:
        """Sample a length in [Min, Max] with a floor of 0."""
        low = max(0, int(request.min)) if request.min is not None else default_min
        high = int(request.max) if request.max is not None else max(default_max, low)
        if high < low:
            high = low
        return self.random.randint(low, high)
