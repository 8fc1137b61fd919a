### Alphabet (RFC 4648, section 4) ###
ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'
PAD = '='
MAX_PADDING = 2

### Inverse lookup ###
ASCII_RANGE = 128
NOT_IN_ALPHABET = -1

### Windows ###
'''
3 raw bytes (24 bits) <--> 4 symbols of 6 bits each
'''
BYTE_BITS = 8
SYMBOL_BITS = 6
SYMBOL_MASK = 0x3F
BYTE_MASK = 0xFF
BYTES_PER_WINDOW = 3
SYMBOLS_PER_WINDOW = 4

# Bytes produced by a trailing partial window, indexed by trimmed length % 4.
# None marks the remainder that no encoding can produce.
TAIL_BYTES = (0, None, 1, 2)

### Operations (used in log lines) ###
OP_ENCODE = 'ENC'
OP_DECODE = 'DEC'
