"""
CLI Commands Module

Command implementations grouped by concern:

- codec: encode, decode, validate, bounds
- hierarchy: parent, children, siblings, neighbors
- measure: distance, bearing
- grid: grid enumeration sub-commands (box, circle, line)
"""
