from enum import Enum


class BookCondition(str, Enum):
    like_new = "Like New"
    very_good = "Very Good"
    good = "Good"
    acceptable = "Acceptable"


class BookFormat(str, Enum):
    hardcover = "Hardcover"
    paperback = "Paperback"
    boxed_set = "Boxed Set"


class BookCategory(str, Enum):
    fiction = "Fiction"
    non_fiction = "Non-Fiction"
    fantasy = "Fantasy"
    sci_fi = "Sci-Fi"
    romance = "Romance"
    mystery = "Mystery"
    children = "Children"
    history = "History"
    biography = "Biography"
    self_help = "Self-Help"


def attribute_values(enum_cls):
    """Display values of an attribute enum, in declaration order."""
    return [member.value for member in enum_cls]
