"""
Shared constants for Markovian.
"""

ALLOCATION_ERROR_MESSAGE = "Allocation failure: Failed to allocate new memory"
FILE_PATH_ERROR_MESSAGE = "Error: incorrect file path"
SENTENCE_END = "."
WORD_DELIMITERS = " \n\t\r"
DEFAULT_TWEET_LENGTH = 20
BOARD_SIZE = 100
DICE_MAX = 6
DEFAULT_WALK_LENGTH = 60
