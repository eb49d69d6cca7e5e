TAKE_KEEPS_HEAD_WARNING_KEY = "take_keeps_head"
EMPTY_LIST_ERROR_MESSAGE = "list must not be empty."
