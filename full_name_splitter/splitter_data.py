# ═════════════════════════════════════════════════════════════════════════════════
# RULE TABLES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Static data consulted by the splitter, in lowercase:
# 1. PREFIXES: surname particles that start the last name and absorb everything after them
# 2. HONORIFICS: titles recognised only as the very first token
# 3. Pattern sources compiled by SplitterConfig (ASCII or Unicode word semantics)
# ═════════════════════════════════════════════════════════════════════════════════

PREFIXES = frozenset(
    {
        # Romance
        "de",
        "da",
        "la",
        "du",
        "del",
        "dei",
        "vda.",  # viuda de
        "dello",
        "della",
        "degli",
        "delle",
        # Germanic
        "van",
        "von",
        "der",
        "den",
        "heer",
        "ten",
        "ter",
        "vande",
        "vanden",
        "vander",
        "voor",
        "ver",
        "aan",
        # Gaelic
        "mc",
        "mac",
        # Semitic
        "ben",
        "ibn",
        "bint",
        "al",
    }
)

HONORIFICS = frozenset(
    {
        "mr",
        "mrs",
        "miss",
        "ms",
        "dr",
        "capt",
        "ofc",
        "rev",
        "prof",
        "sir",
        "cr",
        "hon",
    }
)

# "M" or "W."
INITIAL_PATTERN = r"^\w\.?$"

# O'Connor, d'Artagnan match; Noda' doesn't
APOSTROPHE_PATTERN = r"\w'\w+"

NON_WORD_PATTERN = r"[^\w]"

# "Ludwig Mies van der Rohe"                   => "Ludwig",     "Mies van der Rohe"
# "Javier Reyes de la Barrera"                 => "Javier",     "Reyes de la Barrera"
# "Rosa María Pérez Martínez Vda. de la Cruz"  => "Rosa María", "Pérez Martínez Vda. de la Cruz"
SURNAME_EXCEPTION_PATTERN = r"^(van der|(vda\. )?de la \w+$)"

# Largest given name left behind once a surname exception pulls tokens over
EXCEPTION_FIRST_NAME_LIMIT = 2
