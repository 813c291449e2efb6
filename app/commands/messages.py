MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n%s"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_MEETING_DISPLAYED_INDEX = "The meeting index provided is invalid"
MESSAGE_INVALID_ATTENDEE_INDEX = "The attendee index provided is invalid"
MESSAGE_MEETINGS_LISTED_OVERVIEW = "%d meetings listed!"
