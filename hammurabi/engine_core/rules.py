"""
Rules - Fixed constants of the Hammurabi game.

These are not configurable. Every game uses the same economy.
"""

# Economy
BUSHELS_PER_PERSON = 20  # Grain one person eats per year
LANDS_PER_PERSON = 10  # Max acres one person can farm
BUSHELS_PER_LAND = 1  # Seed cost per acre

UPRISING_THRESHOLD = 0.45

# Random events
PLAGUE_CHANCE = 0.15
RAT_CHANCE = 0.40
MIN_RAT_PERCENTAGE = 0.10
MAX_RAT_PERCENTAGE = 0.40

MIN_LAND_PRICE = 17
MAX_LAND_PRICE = 26

MIN_LAND_PROFIT = 1
MAX_LAND_PROFIT = 6

MIN_NEWCOMERS = 2
MAX_NEWCOMERS = 5

# Opening position
INITIAL_YEAR = 1
INITIAL_BUSHELS = 2800
INITIAL_POPULATION = 100
INITIAL_LANDS = 1000
INITIAL_LAND_PRICE = 22
INITIAL_LAND_PROFIT = 3

# Shown in the first report, before any turn was played
INITIAL_NEW_PEOPLE = 5
INITIAL_BUSHELS_INFESTED = 200
