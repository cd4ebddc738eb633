"""
fontsvg.constants - package constants

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.1.0'

# sfnt table tag
SVG_TAG = 'SVG '

# version, offsetToSVGDocIndex, reserved
SVG_HEADER_SIZE = 10
