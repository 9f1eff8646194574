"""Small helpers for characters, strings, conversion, lists, output, line reading and formatting."""