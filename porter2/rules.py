"""
Rule tables for the English (Porter2) stemmer.

Suffix tables are ordered by decreasing suffix length, so the first entry a
word ends with is always the longest match.
"""

VOWELS = ("a", "e", "i", "o", "u", "y")
DOUBLES = ("bb", "dd", "ff", "gg", "mm", "nn", "pp", "rr", "tt")
LI_ENDINGS = ("c", "d", "e", "g", "h", "k", "m", "n", "r", "t")

INVARIANT_FORMS = ("sky", "news", "howe", "atlas", "cosmos", "bias", "andes")

EXCEPTIONS = {
    "skis": "ski",
    "skies": "sky",
    "dying": "die",
    "lying": "lie",
    "tying": "tie",
    "idly": "idl",
    "gently": "gentl",
    "ugly": "ugli",
    "early": "earli",
    "only": "onli",
    "singly": "singl",
}

# checked after step 1a, these skip the rest of the pipeline
SECOND_LEVEL_EXCEPTIONS = (
    "inning",
    "outing",
    "canning",
    "herring",
    "earring",
    "proceed",
    "exceed",
    "succeed",
)

SEGMENT_EXCEPTIONS = ("gener", "commun", "arsen")

# 1 - replace by "ee" when in R1, 2 - delete when the stem has a vowel
STEP_1B_RULES = {
    "ingly": 2,
    "eedly": 1,
    "edly": 2,
    "eed": 1,
    "ing": 2,
    "ed": 2,
}

STEP_2_RULES = {
    "ization": "ize",
    "ousness": "ous",
    "iveness": "ive",
    "ational": "ate",
    "fulness": "ful",
    "tional": "tion",
    "lessli": "less",
    "biliti": "ble",
    "entli": "ent",
    "ation": "ate",
    "alism": "al",
    "aliti": "al",
    "ousli": "ous",
    "iviti": "ive",
    "fulli": "ful",
    "enci": "ence",
    "anci": "ance",
    "abli": "able",
    "izer": "ize",
    "ator": "ate",
    "alli": "al",
    "bli": "ble",
}

# True - delete only when also in R2, False - delete
STEP_3_RULES = {
    "ational": "ate",
    "tional": "tion",
    "ative": True,
    "alize": "al",
    "icate": "ic",
    "iciti": "ic",
    "ical": "ic",
    "ness": False,
    "ful": False,
}

STEP_4_SUFFIXES = (
    "ement",
    "ance",
    "ence",
    "able",
    "ible",
    "ment",
    "ant",
    "ent",
    "ism",
    "ate",
    "ion",
    "iti",
    "ous",
    "ive",
    "ize",
    "er",
    "ic",
    "al",
)
