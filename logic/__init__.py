"""logic — Pure calculations over the domain entities.

conversion  — report counts → purple-equivalent and EXP
leveling    — experience needed to reach a desired level
"""
