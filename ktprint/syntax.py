from enum import IntEnum, auto


class Token(IntEnum):
    KEYWORD = auto()
    KEYWORD_CONSTANT = auto()
    KEYWORD_DECLARATION = auto()
    KEYWORD_NAMESPACE = auto()

    NAME_CLASS = auto()
    NAME_FUNCTION = auto()
    NAME_NAMESPACE = auto()
    NAME_VARIABLE = auto()

    LITERAL_STRING = auto()
    NUMBER = auto()

    OPERATOR = auto()
    PUNCTUATION = auto()
