"""
fontsvg.scripts - command-line tools

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""
