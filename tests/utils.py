from functools import total_ordering


class Label:
    """Orderable through ``<`` only; equality stays identity."""

    def __init__(self, text):
        self.text = text

    def __lt__(self, other):
        return self.text < other.text

    def __repr__(self):
        return f"Label({self.text!r})"


@total_ordering
class Version:
    def __init__(self, major, minor):
        self.major = major
        self.minor = minor

    def __eq__(self, other):
        return (self.major, self.minor) == (other.major, other.minor)

    def __lt__(self, other):
        return (self.major, self.minor) < (other.major, other.minor)

    __hash__ = None


def by_length(one, other):
    return (len(one) > len(other)) - (len(one) < len(other))
