"""
User-facing message strings shared by parsers and commands.
"""

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n%s"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "
MESSAGE_INVALID_PERSON_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED = "%d persons listed!"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"
