"""Type aliases for data structures."""

# Which change columns the text output shows: daily, weekly, monthly, yearly
ChangeFlags = tuple[bool, bool, bool, bool]
