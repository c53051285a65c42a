"""
Hunger Pool.

Dice-pool resolution for the Rouse/Hunger d10 mechanic, with a plain-text
command loop on top.
"""
