"""Word lists for categories that Faker has no provider for."""

DEPARTMENTS = (
    "Automotive", "Baby", "Beauty", "Books", "Clothing", "Computers", "Electronics",
    "Games", "Garden", "Grocery", "Health", "Home", "Industrial", "Jewelery",
    "Kids", "Movies", "Music", "Outdoors", "Shoes", "Sports", "Tools", "Toys",
)

PRODUCT_ADJECTIVES = (
    "Small", "Ergonomic", "Rustic", "Intelligent", "Gorgeous", "Incredible",
    "Fantastic", "Practical", "Sleek", "Awesome", "Generic", "Handcrafted",
    "Handmade", "Licensed", "Refined", "Unbranded", "Tasty",
)

PRODUCT_MATERIALS = (
    "Steel", "Wooden", "Concrete", "Plastic", "Cotton", "Granite", "Rubber",
    "Metal", "Soft", "Fresh", "Frozen",
)

PRODUCTS = (
    "Chair", "Car", "Computer", "Keyboard", "Mouse", "Bike", "Ball", "Gloves",
    "Pants", "Shirt", "Table", "Shoes", "Hat", "Towels", "Soap", "Tuna",
    "Chicken", "Fish", "Cheese", "Bacon", "Pizza", "Salad", "Sausages", "Chips",
)

DATABASE_COLUMNS = (
    "id", "title", "name", "email", "phone", "token", "group", "category",
    "password", "comment", "avatar", "status", "createdAt", "updatedAt",
)

DATABASE_TYPES = (
    "int", "varchar", "text", "date", "datetime", "tinyint", "time", "timestamp",
    "smallint", "mediumint", "bigint", "decimal", "float", "double", "real", "bit",
    "boolean", "serial", "blob", "binary", "enum", "set", "geometry", "point",
)

DATABASE_COLLATIONS = (
    "utf8_unicode_ci", "utf8_general_ci", "utf8_bin", "ascii_bin",
    "ascii_general_ci", "cp1250_bin", "cp1250_general_ci",
    "SQL_Latin1_General_CP1_CI_AS", "Latin1_General_100_CI_AS_SC_UTF8",
)

DATABASE_ENGINES = ("InnoDB", "MyISAM", "MEMORY", "CSV", "BLACKHOLE", "ARCHIVE")

HACKER_ABBREVIATIONS = (
    "TCP", "HTTP", "SDD", "RAM", "GB", "CSS", "SSL", "AGP", "SQL", "FTP", "PCI",
    "AI", "ADP", "RSS", "XML", "EXE", "COM", "HDD", "THX", "SMTP", "SMS", "USB",
    "PNG", "SAS", "IB", "SCSI", "JSON", "XSS", "JBOD",
)

HACKER_ADJECTIVES = (
    "auxiliary", "primary", "back-end", "digital", "open-source", "virtual",
    "cross-platform", "redundant", "online", "haptic", "multi-byte", "bluetooth",
    "wireless", "1080p", "neural", "optical", "solid state", "mobile",
)

HACKER_NOUNS = (
    "driver", "protocol", "bandwidth", "panel", "microchip", "program", "port",
    "card", "array", "interface", "system", "sensor", "firewall", "hard drive",
    "pixel", "alarm", "feed", "monitor", "application", "transmitter", "bus",
    "circuit", "capacitor", "matrix",
)

HACKER_VERBS = (
    "back up", "bypass", "hack", "override", "compress", "copy", "navigate",
    "index", "connect", "generate", "quantify", "calculate", "synthesize",
    "input", "transmit", "program", "reboot", "parse",
)

HACKER_ING_VERBS = (
    "backing up", "bypassing", "hacking", "overriding", "compressing", "copying",
    "navigating", "indexing", "connecting", "generating", "quantifying",
    "calculating", "synthesizing", "transmitting", "programming", "parsing",
)

HACKER_PHRASES = (
    "If we {verb} the {noun}, we can get to the {abbreviation} {noun} through the {adjective} {abbreviation} {noun}!",
    "We need to {verb} the {adjective} {abbreviation} {noun}!",
    "Try to {verb} the {abbreviation} {noun}, maybe it will {verb} the {adjective} {noun}!",
    "You can't {verb} the {noun} without {ingverb} the {adjective} {abbreviation} {noun}!",
    "Use the {adjective} {abbreviation} {noun}, then you can {verb} the {adjective} {noun}!",
    "The {abbreviation} {noun} is down, {verb} the {adjective} {noun} so we can {verb} the {abbreviation} {noun}!",
    "{ingverb} the {noun} won't do anything, we need to {verb} the {adjective} {abbreviation} {noun}!",
    "I'll {verb} the {adjective} {abbreviation} {noun}, that should {noun} the {abbreviation} {noun}!",
)

ACCOUNT_NAMES = (
    "Checking", "Savings", "Money Market", "Investment", "Home Loan",
    "Credit Card", "Auto Loan", "Personal Loan",
)

TRANSACTION_TYPES = ("deposit", "withdrawal", "payment", "invoice")

JOB_AREAS = (
    "Solutions", "Program", "Brand", "Security", "Research", "Marketing",
    "Directives", "Implementation", "Integration", "Functionality", "Response",
    "Paradigm", "Tactics", "Identity", "Markets", "Group", "Division",
    "Applications", "Optimization", "Operations", "Infrastructure", "Intranet",
    "Communications", "Web", "Branding", "Quality", "Assurance", "Mobility",
    "Accounts", "Data", "Creative", "Configuration", "Accountability",
    "Interactions", "Factors", "Usability", "Metrics",
)

JOB_DESCRIPTORS = (
    "Lead", "Senior", "Direct", "Corporate", "Dynamic", "Future", "Product",
    "National", "Regional", "District", "Central", "Global", "Customer",
    "Investor", "Internal", "International", "Legacy", "Forward", "Principal",
)

JOB_TYPES = (
    "Supervisor", "Associate", "Executive", "Liaison", "Officer", "Manager",
    "Engineer", "Specialist", "Director", "Coordinator", "Administrator",
    "Architect", "Analyst", "Designer", "Planner", "Orchestrator", "Technician",
    "Developer", "Producer", "Consultant", "Assistant", "Facilitator", "Agent",
    "Representative", "Strategist",
)

GENDERS = ("Female", "Male")

CARDINAL_DIRECTIONS = ("North", "East", "South", "West")
ORDINAL_DIRECTIONS = ("Northwest", "Northeast", "Southwest", "Southeast")

RANT_SUBJECTS = ("dog", "cat", "hamster", "neighbor", "brother", "sister", "mother", "father", "boss", "roommate")

RANT_TEMPLATES = (
    "My {subject} loves to play with it.",
    "This {product} works excellently. It buoyantly improves my baseball by a lot.",
    "I tried to use it but got {adjective} all over it. tbh it's just {adjective}.",
    "heard about this on the radio, decided to give it a try. My {subject} said it was {adjective}.",
    "The box this comes in is 3 kilometer by 5 foot. It only works when I'm {place}.",
    "i use it {frequency} when i'm in my {place}. It's {adjective}!",
    "My {subject} is very {adjective} with the {product}. Would buy again.",
    "talk about {adjective}!!! It works {adjective}ly.",
)

RANT_ADJECTIVES = (
    "fantastic", "dreadful", "hilarious", "heroic", "sad", "impressive",
    "mediocre", "lovely", "perplexing", "surprising", "awful", "shiny",
)

RANT_PLACES = ("kitchen", "garage", "office", "school", "car", "country", "church", "zoo")

RANT_FREQUENCIES = ("once a week", "every day", "twice a day", "once in a while", "hourly", "never again")

FILE_TYPES = ("video", "audio", "image", "text", "application")

EXCEPTIONS = (
    "ArgumentException", "ArgumentNullException", "ArgumentOutOfRangeException",
    "DivideByZeroException", "FileNotFoundException", "FormatException",
    "IndexOutOfRangeException", "InvalidOperationException", "KeyNotFoundException",
    "NotImplementedException", "NotSupportedException", "NullReferenceException",
    "OutOfMemoryException", "OverflowException", "StackOverflowException",
    "TimeoutException", "UnauthorizedAccessException",
)

PHONE_FORMATS = (
    "###-###-####",
    "(###) ###-####",
    "1-###-###-####",
    "###.###.####",
    "###-###-#### x###",
    "(###) ###-#### x####",
)

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
