"""
Interactive - Text shown to a terminal player and parsing of their input.

Nothing here touches game rules; it only renders a Game and turns one line
of text into a GameAction.
"""

from __future__ import annotations

from .engine_core.action import GameAction
from .engine_core.state import GameState, StateDelta
from .engine_core.rules import BUSHELS_PER_PERSON, LANDS_PER_PERSON, BUSHELS_PER_LAND

REQUIRED_INPUTS = 3

INTRO = """
Congratulations, you are the newest ruler of ancient Samaria, elected for a {years}-year term of office.
Your duties are to dispense food, direct farming, and buy and sell land as needed to support your people.
Watch out for rat infestations and the plague! Grain is the general currency, measured in bushels.
The following will help you in your decisions:

- Each person needs at least {bushels_per_person} bushels of grain per year to survive.
- Each person can farm at most {lands_per_person} acres of land.
- It takes {bushels_per_land} bushel of grain to farm an acre of land.
- The market price for land fluctuates yearly.

Rule wisely and you will be showered with appreciation at the end of your term.
Rule poorly and you will be kicked out of office!
"""

ACTION_PROMPT = "Input your action with the following format:\n[LandsToBuy] [BushelsToFeed] [LandsToSeed]"


class InvalidInput(ValueError):
    """The player's line could not be read as an action."""


def format_intro(max_years: int) -> str:
    return INTRO.format(
        years=max_years,
        bushels_per_person=BUSHELS_PER_PERSON,
        lands_per_person=LANDS_PER_PERSON,
        bushels_per_land=BUSHELS_PER_LAND,
    )


def format_report(year: int, state: GameState, delta: StateDelta) -> str:
    """The steward's yearly report. Rat and plague lines only when they happened."""
    lines = [
        "Hammurabi: I beg to report to you,",
        f"In Year {year}, {delta.people_starved} people starved.",
        f"{delta.people_added} people came to the city.",
        f"The city population is now {state.population}.",
        f"The city now owns {state.lands} acres.",
        f"You harvested {state.land_profit} bushels per acre.",
    ]
    if delta.has_rat:
        lines.append(f"Rats ate {delta.bushels_infested} bushels.")
    if delta.has_plague:
        lines.append(f"Plague killed {delta.people_killed} people.")
    lines.append(f"You now have {state.bushels} bushels in store.")
    lines.append(f"Land is trading at {state.land_price} bushels per acre.")
    return "\n".join(lines)


def parse_action(text: str) -> GameAction:
    """
    Parse '[LandsToBuy] [BushelsToFeed] [LandsToSeed]'.

    Range checks are left to the engine; only the shape is checked here.
    """
    fields = text.split()
    if len(fields) != REQUIRED_INPUTS:
        raise InvalidInput(
            f"Expected {REQUIRED_INPUTS} numbers, got {len(fields)}."
        )

    try:
        lands_to_buy, bushels_to_feed, lands_to_seed = (int(f) for f in fields)
    except ValueError as e:
        raise InvalidInput(f"Not a whole number: {e}") from e

    return GameAction(
        lands_to_buy=lands_to_buy,
        bushels_to_feed=bushels_to_feed,
        lands_to_seed=lands_to_seed,
    )
