# versegate/services/references/abbreviations.py
"""
Book name table for the reference parser.

Keys are lowercase with all whitespace removed, because the tokenizer
never emits whitespace: "1 John", "1john" and "I John" all reach the
table as "1john" or "ijohn". Values are canonical book names.

The table is built once at import time and never mutated.
"""

from types import MappingProxyType


# Canonical (Protestant) order; a local corpus is expected to store
# verses in this order.
CANONICAL_BOOKS = (
    "Genesis",
    "Exodus",
    "Leviticus",
    "Numbers",
    "Deuteronomy",
    "Joshua",
    "Judges",
    "Ruth",
    "1 Samuel",
    "2 Samuel",
    "1 Kings",
    "2 Kings",
    "1 Chronicles",
    "2 Chronicles",
    "Ezra",
    "Nehemiah",
    "Esther",
    "Job",
    "Psalms",
    "Proverbs",
    "Ecclesiastes",
    "Song of Solomon",
    "Isaiah",
    "Jeremiah",
    "Lamentations",
    "Ezekiel",
    "Daniel",
    "Hosea",
    "Joel",
    "Amos",
    "Obadiah",
    "Jonah",
    "Micah",
    "Nahum",
    "Habakkuk",
    "Zephaniah",
    "Haggai",
    "Zechariah",
    "Malachi",
    "Matthew",
    "Mark",
    "Luke",
    "John",
    "Acts",
    "Romans",
    "1 Corinthians",
    "2 Corinthians",
    "Galatians",
    "Ephesians",
    "Philippians",
    "Colossians",
    "1 Thessalonians",
    "2 Thessalonians",
    "1 Timothy",
    "2 Timothy",
    "Titus",
    "Philemon",
    "Hebrews",
    "James",
    "1 Peter",
    "2 Peter",
    "1 John",
    "2 John",
    "3 John",
    "Jude",
    "Revelation",
)


_BOOK_NAMES = {
    # Torah/Pentateuch
    "gen": "Genesis",
    "genesis": "Genesis",
    "gn": "Genesis",
    "ge": "Genesis",
    "exod": "Exodus",
    "ex": "Exodus",
    "exodus": "Exodus",
    "exo": "Exodus",
    "lev": "Leviticus",
    "leviticus": "Leviticus",
    "lv": "Leviticus",
    "le": "Leviticus",
    "num": "Numbers",
    "numbers": "Numbers",
    "nm": "Numbers",
    "nu": "Numbers",
    "deut": "Deuteronomy",
    "deuteronomy": "Deuteronomy",
    "dt": "Deuteronomy",
    "deu": "Deuteronomy",

    # Historical Books
    "josh": "Joshua",
    "joshua": "Joshua",
    "jos": "Joshua",
    "judg": "Judges",
    "judges": "Judges",
    "jdg": "Judges",
    "jg": "Judges",
    "ruth": "Ruth",
    "ru": "Ruth",
    "rth": "Ruth",
    "1sam": "1 Samuel",
    "1samuel": "1 Samuel",
    "1sa": "1 Samuel",
    "isam": "1 Samuel",
    "isamuel": "1 Samuel",
    "2sam": "2 Samuel",
    "2samuel": "2 Samuel",
    "2sa": "2 Samuel",
    "iisam": "2 Samuel",
    "iisamuel": "2 Samuel",
    "1kgs": "1 Kings",
    "1kings": "1 Kings",
    "1ki": "1 Kings",
    "ikgs": "1 Kings",
    "ikings": "1 Kings",
    "2kgs": "2 Kings",
    "2kings": "2 Kings",
    "2ki": "2 Kings",
    "iikgs": "2 Kings",
    "iikings": "2 Kings",
    "1chr": "1 Chronicles",
    "1chron": "1 Chronicles",
    "1chronicles": "1 Chronicles",
    "1ch": "1 Chronicles",
    "ichr": "1 Chronicles",
    "ichronicles": "1 Chronicles",
    "2chr": "2 Chronicles",
    "2chron": "2 Chronicles",
    "2chronicles": "2 Chronicles",
    "2ch": "2 Chronicles",
    "iichr": "2 Chronicles",
    "iichronicles": "2 Chronicles",
    "ezra": "Ezra",
    "ezr": "Ezra",
    "neh": "Nehemiah",
    "nehemiah": "Nehemiah",
    "ne": "Nehemiah",
    "esth": "Esther",
    "esther": "Esther",
    "est": "Esther",
    "es": "Esther",

    # Wisdom/Poetry
    "job": "Job",
    "jb": "Job",
    "ps": "Psalms",
    "psalm": "Psalms",
    "psalms": "Psalms",
    "psa": "Psalms",
    "pss": "Psalms",
    "prov": "Proverbs",
    "proverbs": "Proverbs",
    "pr": "Proverbs",
    "prv": "Proverbs",
    "pro": "Proverbs",
    "eccl": "Ecclesiastes",
    "ecclesiastes": "Ecclesiastes",
    "ecc": "Ecclesiastes",
    "ec": "Ecclesiastes",
    "qoh": "Ecclesiastes",
    "qoheleth": "Ecclesiastes",
    "song": "Song of Solomon",
    "songofsolomon": "Song of Solomon",
    "songofsongs": "Song of Solomon",
    "sos": "Song of Solomon",
    "ss": "Song of Solomon",
    "canticles": "Song of Solomon",
    "cant": "Song of Solomon",
    "sg": "Song of Solomon",

    # Major Prophets
    "isa": "Isaiah",
    "isaiah": "Isaiah",
    "is": "Isaiah",
    "jer": "Jeremiah",
    "jeremiah": "Jeremiah",
    "je": "Jeremiah",
    "lam": "Lamentations",
    "lamentations": "Lamentations",
    "la": "Lamentations",
    "ezek": "Ezekiel",
    "ezekiel": "Ezekiel",
    "eze": "Ezekiel",
    "ez": "Ezekiel",
    "dan": "Daniel",
    "daniel": "Daniel",
    "dn": "Daniel",
    "da": "Daniel",

    # Minor Prophets
    "hos": "Hosea",
    "hosea": "Hosea",
    "ho": "Hosea",
    "joel": "Joel",
    "jl": "Joel",
    "joe": "Joel",
    "amos": "Amos",
    "am": "Amos",
    "obad": "Obadiah",
    "obadiah": "Obadiah",
    "ob": "Obadiah",
    "jonah": "Jonah",
    "jon": "Jonah",
    "jnh": "Jonah",
    "mic": "Micah",
    "micah": "Micah",
    "mi": "Micah",
    "nah": "Nahum",
    "nahum": "Nahum",
    "na": "Nahum",
    "hab": "Habakkuk",
    "habakkuk": "Habakkuk",
    "hb": "Habakkuk",
    "zeph": "Zephaniah",
    "zephaniah": "Zephaniah",
    "zep": "Zephaniah",
    "hag": "Haggai",
    "haggai": "Haggai",
    "hg": "Haggai",
    "zech": "Zechariah",
    "zechariah": "Zechariah",
    "zec": "Zechariah",
    "zc": "Zechariah",
    "mal": "Malachi",
    "malachi": "Malachi",
    "ml": "Malachi",

    # New Testament - Gospels
    "matt": "Matthew",
    "matthew": "Matthew",
    "mt": "Matthew",
    "mat": "Matthew",
    "mark": "Mark",
    "mk": "Mark",
    "mr": "Mark",
    "mrk": "Mark",
    "luke": "Luke",
    "lk": "Luke",
    "lu": "Luke",
    "luk": "Luke",
    "john": "John",
    "jn": "John",
    "joh": "John",
    "jhn": "John",

    # Acts
    "acts": "Acts",
    "ac": "Acts",
    "act": "Acts",

    # Pauline Epistles
    "rom": "Romans",
    "romans": "Romans",
    "ro": "Romans",
    "rm": "Romans",
    "1cor": "1 Corinthians",
    "1corinthians": "1 Corinthians",
    "1co": "1 Corinthians",
    "icor": "1 Corinthians",
    "icorinthians": "1 Corinthians",
    "2cor": "2 Corinthians",
    "2corinthians": "2 Corinthians",
    "2co": "2 Corinthians",
    "iicor": "2 Corinthians",
    "iicorinthians": "2 Corinthians",
    "gal": "Galatians",
    "galatians": "Galatians",
    "ga": "Galatians",
    "eph": "Ephesians",
    "ephesians": "Ephesians",
    "ep": "Ephesians",
    "phil": "Philippians",
    "philippians": "Philippians",
    "php": "Philippians",
    "pp": "Philippians",
    "col": "Colossians",
    "colossians": "Colossians",
    "1thess": "1 Thessalonians",
    "1thessalonians": "1 Thessalonians",
    "1th": "1 Thessalonians",
    "ithess": "1 Thessalonians",
    "ithessalonians": "1 Thessalonians",
    "2thess": "2 Thessalonians",
    "2thessalonians": "2 Thessalonians",
    "2th": "2 Thessalonians",
    "iithess": "2 Thessalonians",
    "iithessalonians": "2 Thessalonians",
    "1tim": "1 Timothy",
    "1timothy": "1 Timothy",
    "1ti": "1 Timothy",
    "itim": "1 Timothy",
    "itimothy": "1 Timothy",
    "2tim": "2 Timothy",
    "2timothy": "2 Timothy",
    "2ti": "2 Timothy",
    "iitim": "2 Timothy",
    "iitimothy": "2 Timothy",
    "titus": "Titus",
    "tit": "Titus",
    "philem": "Philemon",
    "philemon": "Philemon",
    "phlm": "Philemon",
    "phm": "Philemon",
    "pm": "Philemon",

    # General Epistles
    "heb": "Hebrews",
    "hebrews": "Hebrews",
    "he": "Hebrews",
    "jas": "James",
    "james": "James",
    "jm": "James",
    "ja": "James",
    "1pet": "1 Peter",
    "1peter": "1 Peter",
    "1pe": "1 Peter",
    "1pt": "1 Peter",
    "ipet": "1 Peter",
    "ipeter": "1 Peter",
    "2pet": "2 Peter",
    "2peter": "2 Peter",
    "2pe": "2 Peter",
    "2pt": "2 Peter",
    "iipet": "2 Peter",
    "iipeter": "2 Peter",
    "1john": "1 John",
    "1jn": "1 John",
    "1jo": "1 John",
    "1jhn": "1 John",
    "ijohn": "1 John",
    "ijn": "1 John",
    "2john": "2 John",
    "2jn": "2 John",
    "2jo": "2 John",
    "2jhn": "2 John",
    "iijohn": "2 John",
    "iijn": "2 John",
    "3john": "3 John",
    "3jn": "3 John",
    "3jo": "3 John",
    "3jhn": "3 John",
    "iiijohn": "3 John",
    "iiijn": "3 John",
    "jude": "Jude",
    "jd": "Jude",
    "jud": "Jude",

    # Revelation
    "rev": "Revelation",
    "revelation": "Revelation",
    "revelations": "Revelation",
    "re": "Revelation",
    "apoc": "Revelation",
    "apocalypse": "Revelation",
    "rv": "Revelation",
}

# Full canonical names always resolve to themselves.
for _name in CANONICAL_BOOKS:
    _BOOK_NAMES.setdefault(_name.lower().replace(" ", ""), _name)

BOOK_NAMES = MappingProxyType(_BOOK_NAMES)

# OSIS codes, as used in Bible Gateway line classes ("text 1John-1-1").
OSIS_CODES = MappingProxyType(dict(zip(
    (
        "Gen", "Exod", "Lev", "Num", "Deut", "Josh", "Judg", "Ruth",
        "1Sam", "2Sam", "1Kgs", "2Kgs", "1Chr", "2Chr", "Ezra", "Neh",
        "Esth", "Job", "Ps", "Prov", "Eccl", "Song", "Isa", "Jer",
        "Lam", "Ezek", "Dan", "Hos", "Joel", "Amos", "Obad", "Jonah",
        "Mic", "Nah", "Hab", "Zeph", "Hag", "Zech", "Mal",
        "Matt", "Mark", "Luke", "John", "Acts", "Rom", "1Cor", "2Cor",
        "Gal", "Eph", "Phil", "Col", "1Thess", "2Thess", "1Tim", "2Tim",
        "Titus", "Phlm", "Heb", "Jas", "1Pet", "2Pet", "1John", "2John",
        "3John", "Jude", "Rev",
    ),
    CANONICAL_BOOKS,
    strict=True,
)))


def lookup_book(key: str):
    """Return the canonical name for a normalized key, or None."""
    return BOOK_NAMES.get(key)


def canonical_book_name(name: str) -> str:
    """
    Map a display name from an outside source ("Psalm", "Song of Songs")
    to its canonical name. Unknown names are returned unchanged.
    """
    key = "".join(name.lower().split()).replace(".", "")
    return BOOK_NAMES.get(key, name.strip())


def book_from_osis(code: str):
    """Return the canonical name for an OSIS book code, or None."""
    return OSIS_CODES.get(code) or lookup_book(code.lower())
