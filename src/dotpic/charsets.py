# Quadrant blocks, indexed by bitmask: 1=upper-left, 2=upper-right, 4=lower-left, 8=lower-right
BLOCKS = " ▘▝▀▖▌▞▛▗▚▐▜▄▙▟█"

# Braille patterns: U+2800 to U+28FF (256 characters, 2x4 dot grid), code point = 0x2800 + bitmask
BRAILLE_BASE = 0x2800
BRAILLE = "".join(chr(i) for i in range(BRAILLE_BASE, BRAILLE_BASE + 0x100))
