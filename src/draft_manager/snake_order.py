"""Snake draft turn order.

Everything here is a pure function of the 0-based global pick index, so the
team on the clock can always be re-derived from the ledger length alone.
"""

from typing import NamedTuple


class PickSlot(NamedTuple):
    round: int  # 1-based
    pick: int  # 1-based pick within the round
    overall: int  # 1-based
    team_index: int  # 0-based


def get_snake_team_index(pick_index: int, num_teams: int) -> int:
    """Team on the clock for a 0-based pick index.

    Even (0-based) rounds go 0 -> N-1, odd rounds go N-1 -> 0.
    """
    round_index, pick_in_round = divmod(pick_index, num_teams)
    if round_index % 2 == 0:
        return pick_in_round
    return num_teams - 1 - pick_in_round


def get_pick_slot(pick_index: int, num_teams: int) -> PickSlot:
    """Round, pick-in-round, overall number and team for a 0-based pick index."""
    round_index, pick_in_round = divmod(pick_index, num_teams)
    return PickSlot(
        round=round_index + 1,
        pick=pick_in_round + 1,
        overall=pick_index + 1,
        team_index=get_snake_team_index(pick_index, num_teams),
    )


def get_ordinal_suffix(n: int) -> str:
    """Ordinal suffix for *n*: 1 -> "st", 2 -> "nd", 11 -> "th", 23 -> "rd"."""
    if 10 <= n % 100 <= 20:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def describe_draft_slot(user_position: int, num_teams: int) -> str:
    """Describe where a 1-based draft slot picks in odd and even rounds."""
    even_round_slot = num_teams + 1 - user_position
    return (
        f"{user_position}{get_ordinal_suffix(user_position)} in odd rounds, "
        f"{even_round_slot}{get_ordinal_suffix(even_round_slot)} in even rounds"
    )
