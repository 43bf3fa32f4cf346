"""Command-line mock draft against computer opponents.

Usage:
    python -m src.draft_manager.cli --scoring PPR --position 5 --speed fast
"""

import logging
import random
import sys
from pathlib import Path

import click

from src.data_pipeline.config import POSITIONS, SCORING_FORMATS, SCORING_LABELS
from src.data_pipeline.scoring import format_stat, get_stat_columns
from src.draft_manager.config import DRAFT_SPEED_DELAYS
from src.draft_manager.draft_controller import DraftController
from src.draft_manager.draft_initializer import DraftInitializer
from src.draft_manager.draft_state import TeamRoster
from src.draft_manager.snake_order import describe_draft_slot
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)

BOARD_SIZE = 10


def _format_player_row(index: int, player) -> str:
    stats = "  ".join(
        f"{col['label']} {format_stat(player.raw.get(col['key']))}"
        for col in get_stat_columns(player.position)
    )
    return (
        f"{index:>3}. {player.name[:24]:<25}{player.position:<4}"
        f"{player.points:>8.2f} pts  VOR {player.vor:>7.2f}  T{player.tier:<3} {stats}"
    )


def _show_board(controller: DraftController, position_filter) -> list:
    state = controller.draft_state
    players = controller.get_available_players(position=position_filter)[:BOARD_SIZE]

    upcoming = ", ".join(
        f"#{p.pick} T{p.team}{'*' if p.is_user else ''}"
        for p in controller.upcoming_picks()
    )
    click.echo("")
    click.echo(
        f"Round {state.current_round}, pick {state.current_pick_index + 1} "
        f"- you're on the clock. Up next: {upcoming}"
    )
    click.echo(f"Best available{f' ({position_filter})' if position_filter else ''}:")
    for idx, player in enumerate(players, start=1):
        click.echo(_format_player_row(idx, player))
    return players


def _show_roster(controller: DraftController, team: TeamRoster):
    summary = controller.validator.get_roster_summary(team)
    click.echo(f"{team.team_name} roster (* = starter):")
    for position in POSITIONS:
        names = [
            f"{p.name}{'*' if TeamRoster.is_starter_slot(position, i) else ''}"
            for i, p in enumerate(team.roster.get(position, []))
        ]
        status = summary[position]
        need = f", need {status['needed']} more" if status["needed"] else ""
        click.echo(
            f"  {position} ({status['filled']}/{status['min']}-{status['max']}{need}): "
            f"{', '.join(names) or '-'}"
        )


def _prompt_user_pick(controller: DraftController):
    """Prompt until the user makes a pick or hands control to autopick."""
    position_filter = None
    while True:
        players = _show_board(controller, position_filter)
        answer = click.prompt(
            "Pick # | QB/RB/WR/TE to filter | ALL | AUTO", default="1"
        ).strip().upper()

        if answer == "AUTO":
            controller.set_autopick(True)
            return
        if answer == "ALL":
            position_filter = None
            continue
        if answer in POSITIONS:
            position_filter = answer
            continue
        if answer.isdigit() and 1 <= int(answer) <= len(players):
            if controller.handle_user_pick(players[int(answer) - 1]) is not None:
                return
            click.echo("That pick isn't allowed (position full?). Try again.")
            continue
        click.echo(f"Didn't understand {answer!r}.")


def _show_results(controller: DraftController):
    state = controller.draft_state
    click.echo("")
    if state.pool_exhausted:
        click.echo("Draft ended early: the player pool ran out.")
    click.echo("Final standings (starter points):")
    for rank, ranking in enumerate(controller.get_team_rankings(), start=1):
        marker = " <-- you" if ranking.is_user else ""
        click.echo(
            f"{rank:>3}. {ranking.name:<14}{ranking.starter_points:>9.1f} starters"
            f"{ranking.total_points:>9.1f} total{marker}"
        )
    click.echo("")
    _show_roster(controller, state.get_user_team())


@click.command()
@click.option(
    "--scoring",
    type=click.Choice(sorted(SCORING_FORMATS), case_sensitive=False),
    default="PPR",
    help="Scoring format (default: PPR)",
)
@click.option("--teams", type=int, default=12, help="Number of teams (default: 12)")
@click.option("--rounds", type=int, default=15, help="Number of rounds (default: 15)")
@click.option(
    "--roster-size", type=int, default=15, help="Roster cap per team (default: 15)"
)
@click.option(
    "--position", type=int, default=1, help="Your 1-based draft slot (default: 1)"
)
@click.option(
    "--speed",
    type=click.Choice(sorted(DRAFT_SPEED_DELAYS)),
    default="medium",
    help="Computer pick pacing (default: medium)",
)
@click.option("--autopick", is_flag=True, help="Let the computer pick for you too")
@click.option(
    "--data-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory with the per-position projection CSVs",
)
@click.option("--seed", type=int, default=None, help="Seed for computer pick noise")
@click.option("--verbose", is_flag=True, help="Log every pick to the console")
def run(
    scoring: str,
    teams: int,
    rounds: int,
    roster_size: int,
    position: int,
    speed: str,
    autopick: bool,
    data_dir,
    seed,
    verbose: bool,
) -> None:
    """Run a fantasy football snake mock draft against computer teams."""
    setup_logging("INFO" if verbose else "WARNING")

    scoring = scoring.upper()
    try:
        draft_state = DraftInitializer(data_dir).create_draft(
            scoring_format=scoring,
            league_size=teams,
            rounds=rounds,
            roster_size=roster_size,
            user_position=position,
            draft_speed=speed,
            autopick=autopick,
        )
    except ValueError as e:
        click.echo(f"Invalid draft settings: {e}", err=True)
        sys.exit(2)

    controller = DraftController(draft_state, rng=random.Random(seed))
    click.echo(
        f"{SCORING_LABELS[scoring]} mock draft, {teams} teams x {rounds} rounds. "
        f"You pick {describe_draft_slot(position, teams)}."
    )

    controller.start()
    while not controller.is_complete:
        controller.run_until_user_turn()
        if controller.is_complete:
            break
        if controller.should_auto_pick:
            # Autopick was switched on but no pick could be made
            logger.error("Automated pick failed at pick %d", draft_state.current_pick_index + 1)
            sys.exit(1)
        _prompt_user_pick(controller)

    _show_results(controller)


if __name__ == "__main__":
    run()
