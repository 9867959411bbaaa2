"""Jersey guessing rules.

``difficulty`` maps a level to a tier, ``catalog`` and ``questions`` build
four-option jersey questions from the seeded players, ``session`` plays one
20-level game on top of the ``timers`` schedulers, and ``submission`` saves
the final tallies.
"""
