"""Command line dashboard for betting tips."""

import logging

import click
from rich.console import Console

from ..config import get_settings
from ..data import MatchDataFetcher, SportType
from ..database import get_session_factory, init_db
from ..dashboard import TipDashboard, TipView
from ..tips import TipRepository, TipService
from ..utils import setup_logging

console = Console()
logger = logging.getLogger(__name__)

SPORT_CHOICE = click.Choice([sport.value for sport in SportType])

# Statistic compared by the classifier for each sport
CLASSIFIER_STAT = {
    SportType.FOOTBALL: "form",
    SportType.NBA: "avg_points",
}


def build_repository() -> TipRepository:
    """Wire the tip store and match fetcher from settings."""
    settings = get_settings()
    init_db()
    return TipRepository(get_session_factory(), MatchDataFetcher(settings), settings)


PROVIDER_KEY_ENV = {
    SportType.FOOTBALL: "API_FOOTBALL_KEY",
    SportType.NBA: "API_BASKETBALL_KEY",
}


def warn_if_unconfigured(repository: TipRepository, sport: SportType) -> None:
    settings = repository.settings
    enabled = settings.football_enabled if sport == SportType.FOOTBALL else settings.basketball_enabled
    if not enabled:
        console.print(
            f"[yellow]⚠️  {PROVIDER_KEY_ENV[sport]} is not set, no live {sport.value} data available[/yellow]"
        )


def sport_option(func):
    return click.option(
        "--sport",
        type=SPORT_CHOICE,
        default=SportType.FOOTBALL.value,
        show_default=True,
        help="Sport to work on",
    )(func)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Verbose output",
)
def main(verbose):
    """SmartHub Tips: betting tips for football and NBA matches."""
    setup_logging(level="DEBUG" if verbose else None)


@main.command("init-db")
def init_db_command():
    """Create the tips table."""
    init_db()
    console.print("✅ Tips database initialized")


@main.command()
@sport_option
@click.option("--limit", type=int, help="Number of tips to show (default from settings)")
@click.option("--refresh", is_flag=True, help="Refresh match data before showing tips")
def tips(sport, limit, refresh):
    """Show the latest tips for a sport."""
    try:
        dashboard = TipDashboard(build_repository(), console=console)
        data = dashboard.load_data(SportType(sport), limit=limit, refresh=refresh)
        dashboard.render(data)
    except Exception as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        logger.debug("Dashboard failed", exc_info=True)
        raise click.Abort()


@main.command()
@sport_option
def refresh(sport):
    """Re-fetch match data for the most recent tips."""
    repository = build_repository()
    with console.status(f"Refreshing {sport} match data..."):
        count = repository.refresh_batch(SportType(sport))
    console.print(f"🔄 {count} tips updated")


@main.command()
@sport_option
@click.option("--date", "date_", help="Date as YYYY-MM-DD (default: today)")
def games(sport, date_):
    """List provider games for a date."""
    sport = SportType(sport)
    repository = build_repository()
    warn_if_unconfigured(repository, sport)
    dashboard = TipDashboard(repository, console=console)
    if date_:
        found = repository.fetcher.fetch_matches_for_date(sport, date_)
    else:
        found = TipService(repository).sync_today_games(sport)
    dashboard.render_games(sport, found)


@main.command()
@click.argument("game_id")
@sport_option
@click.option("--stats", is_flag=True, help="Include per-team match statistics")
def game(game_id, sport, stats):
    """Show one provider game."""
    sport = SportType(sport)
    repository = build_repository()
    warn_if_unconfigured(repository, sport)
    found = repository.fetcher.fetch_match_by_id(sport, game_id, include_statistics=stats)
    if found is None:
        console.print(f"[red]❌ Game {game_id} not found[/red]")
        raise click.Abort()
    TipDashboard(repository, console=console).render_game(found)


@main.command()
@click.option("--limit", type=int, default=20, show_default=True, help="Number of tips to show")
def recent(limit):
    """Show the newest tips across all sports."""
    repository = build_repository()
    TipDashboard(repository, console=console).render_recent(repository.list_all(limit))


@main.command()
@click.argument("match_id")
@sport_option
@click.option("--home", "home_stat", type=float, default=0.0, help="Home form (football) or average points (NBA)")
@click.option("--away", "away_stat", type=float, default=0.0, help="Away form (football) or average points (NBA)")
@click.option("--odds", type=float, help="Decimal odds for the tip")
def create(match_id, sport, home_stat, away_stat, odds):
    """Classify a match and store the resulting tip."""
    sport = SportType(sport)
    stat = CLASSIFIER_STAT[sport]
    statistics = {"home": {stat: home_stat}, "away": {stat: away_stat}}

    tip = TipService(build_repository()).generate_tip(match_id, sport, statistics, odds=odds)
    if tip is None:
        console.print("[red]❌ Tip could not be stored[/red]")
        raise click.Abort()

    view = TipView.from_tip(tip)
    console.print(
        f"✅ Created tip [cyan]{tip.id}[/cyan]: {view.tip_type} "
        f"({view.confidence_pct}%, {view.risk_label}) for {view.home_team} vs {view.away_team}"
    )


@main.command()
@click.argument("game_id")
@sport_option
def sample(game_id, sport):
    """Create an illustrative tip for a real game."""
    tip = TipService(build_repository()).create_sample_tip(game_id, SportType(sport))
    if tip is None:
        console.print(f"[red]❌ Game {game_id} not found, no tip created[/red]")
        raise click.Abort()
    console.print(f"✅ Created sample tip [cyan]{tip.id}[/cyan]")


@main.command()
@click.argument("tip_id")
def delete(tip_id):
    """Delete a tip by id."""
    if not build_repository().remove(tip_id):
        console.print(f"[red]❌ Could not delete tip {tip_id}[/red]")
        raise click.Abort()
    console.print(f"🗑️  Deleted tip {tip_id}")


if __name__ == "__main__":
    main()
