"""Terminal escape sequences and RGB colour values."""

RESET = "\033[0m"

BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

BOLDBLACK = "\033[1m\033[30m"
BOLDRED = "\033[1m\033[31m"
BOLDGREEN = "\033[1m\033[32m"
BOLDYELLOW = "\033[1m\033[33m"
BOLDBLUE = "\033[1m\033[34m"
BOLDMAGENTA = "\033[1m\033[35m"
BOLDCYAN = "\033[1m\033[36m"
BOLDWHITE = "\033[1m\033[37m"

BACKGROUND_WHITE = "\x1b[47m"
TEXT_BLACK = "\x1b[30m"

HEX_BLACK = 0x000000
HEX_RED = 0xFF0000
HEX_GREEN = 0x00FF00
HEX_YELLOW = 0xFFFF00
HEX_BLUE = 0x0000FF
HEX_MAGENTA = 0xFF00FF
HEX_CYAN = 0x00FFFF
HEX_WHITE = 0xFFFFFF