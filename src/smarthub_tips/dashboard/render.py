"""Terminal dashboard for betting tips."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..data.models import GameData, SportType
from ..tips import BettingTip, TipRepository
from .samples import sample_tips
from .views import CONFIDENCE_STYLES, RISK_STYLES, STATUS_STYLES, TipView

logger = logging.getLogger(__name__)

SPORT_TITLES = {
    SportType.FOOTBALL: "⚽ Football",
    SportType.NBA: "🏀 NBA",
}


@dataclass
class DashboardData:
    """Tips prepared for one sport tab."""

    sport: SportType
    views: List[TipView] = field(default_factory=list)
    is_sample: bool = False
    refreshed: Optional[int] = None
    loaded_at: datetime = field(default_factory=datetime.now)

    @property
    def tip_count(self) -> int:
        return len(self.views)

    @property
    def average_confidence(self) -> float:
        """Average confidence as percentage."""
        if not self.views:
            return 0.0
        return sum(v.confidence_score for v in self.views) / len(self.views) * 100


class TipDashboard:
    """Load tips for a sport and render them with rich."""

    def __init__(self, repository: TipRepository, console: Optional[Console] = None):
        self.repository = repository
        self.console = console or Console()

    def load_data(self, sport: SportType, limit: Optional[int] = None, refresh: bool = False) -> DashboardData:
        """Tips for a sport, falling back to demo tips when the store has none."""
        sport = SportType(sport)
        refreshed = self.repository.refresh_batch(sport) if refresh else None

        tips: List[BettingTip] = self.repository.list(sport, limit)
        is_sample = not tips
        if is_sample:
            logger.info(f"No stored {sport.value} tips, showing sample content")
            tips = sample_tips(sport)

        return DashboardData(
            sport=sport,
            views=[TipView.from_tip(tip) for tip in tips],
            is_sample=is_sample,
            refreshed=refreshed,
        )

    def render(self, data: DashboardData) -> None:
        self.console.print(self.summary_panel(data))
        for view in data.views:
            self.console.print(self.tip_panel(view))

    def summary_panel(self, data: DashboardData) -> Panel:
        lines = [
            f"[bold]{SPORT_TITLES[data.sport]}[/bold]  updated {data.loaded_at:%H:%M}",
            f"Tips: {data.tip_count}   Average confidence: {data.average_confidence:.0f}%",
        ]
        if data.refreshed is not None:
            lines.append(f"Match data refreshed for {data.refreshed} tips")
        if data.is_sample:
            lines.append(
                "[yellow]Showing sample tips. Configure the tip store and the "
                "API-Football / API-Basketball keys for live data.[/yellow]"
            )
        return Panel("\n".join(lines), title="SmartHub Tips", border_style="green")

    def tip_panel(self, view: TipView) -> Panel:
        header = Table.grid(expand=True)
        header.add_column(ratio=1)
        header.add_column(justify="right")
        header.add_row(
            Text(view.competition, style="bold"),
            Text(view.status_label, style=STATUS_STYLES[view.status]),
        )

        matchup = f"[bold]{view.home_team}[/bold] vs [bold]{view.away_team}[/bold]"
        if view.scoreline:
            matchup += f"   [bold white]{view.scoreline}[/bold white]"

        details = Table.grid(padding=(0, 2))
        details.add_column(style="dim")
        details.add_column()
        details.add_row("Kick-off", view.kickoff)
        details.add_row("Venue", view.venue)
        details.add_row("Tip", f"[bold]{view.tip_type}[/bold]")
        details.add_row(
            "Confidence",
            f"[{CONFIDENCE_STYLES[view.confidence_band]}]{view.confidence_pct}%[/]",
        )
        if view.odds:
            details.add_row("Suggested odds", f"[bold green]{view.odds:.2f}[/bold green]")
        details.add_row("Risk", f"[{RISK_STYLES[view.risk_level]}]{view.risk_label}[/]")

        analysis = Text(view.reasoning)
        stats = Text("\n".join(f"• {stat}" for stat in view.key_stats), style="cyan")

        return Panel(
            Group(header, Text.from_markup(matchup), details, analysis, stats),
            border_style="bright_black",
        )

    def render_games(self, sport: SportType, games: List[GameData]) -> None:
        """Table of provider games for a sport."""
        if not games:
            self.console.print(f"[yellow]No {SportType(sport).value} games found.[/yellow]")
            return

        table = Table(title=f"{SPORT_TITLES[SportType(sport)]} games")
        table.add_column("ID", style="cyan")
        table.add_column("Competition", style="magenta")
        table.add_column("Home")
        table.add_column("Away")
        table.add_column("Score", justify="center")
        table.add_column("Status", justify="center")
        table.add_column("Date")

        for game in games:
            score = f"{game.home_score or 0} - {game.away_score or 0}" if game.has_started else "-"
            table.add_row(
                game.game_id,
                game.competition,
                game.home_team,
                game.away_team,
                score,
                Text(game.status.value, style=STATUS_STYLES[game.status]),
                game.date,
            )

        self.console.print(table)

    def render_game(self, game: GameData) -> None:
        """One provider game, with per-team statistics when attached."""
        matchup = f"[bold]{game.home_team}[/bold] vs [bold]{game.away_team}[/bold]"
        if game.has_started:
            matchup += f"   [bold white]{game.home_score or 0} - {game.away_score or 0}[/bold white]"
        lines = [
            matchup,
            f"{game.competition}  |  {game.venue}  |  {game.date}",
        ]
        status = Text(game.status.value, style=STATUS_STYLES[game.status])
        self.console.print(Panel("\n".join(lines), title=f"Game {game.game_id}", subtitle=status))

        home_stats = game.additional_data.get("home_team_stats") or {}
        away_stats = game.additional_data.get("away_team_stats") or {}
        if not (home_stats or away_stats):
            return

        table = Table(title="Team statistics")
        table.add_column("Statistic", style="dim")
        table.add_column(game.home_team, justify="right")
        table.add_column(game.away_team, justify="right")
        for name in dict.fromkeys([*home_stats, *away_stats]):
            table.add_row(str(name), _stat_text(home_stats.get(name)), _stat_text(away_stats.get(name)))
        self.console.print(table)

    def render_recent(self, tips: List[BettingTip]) -> None:
        """Newest tips across every sport in one table."""
        if not tips:
            self.console.print("[yellow]No tips stored yet.[/yellow]")
            return

        table = Table(title="Latest tips")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Sport")
        table.add_column("Match")
        table.add_column("Tip", style="bold")
        table.add_column("Confidence", justify="right")
        table.add_column("Created")

        for tip in tips:
            view = TipView.from_tip(tip)
            table.add_row(
                tip.id,
                SPORT_TITLES[tip.sport_type],
                f"{view.home_team} vs {view.away_team}",
                view.tip_type,
                Text(f"{view.confidence_pct}%", style=CONFIDENCE_STYLES[view.confidence_band]),
                f"{tip.created_at:%d/%m/%Y %H:%M}",
            )

        self.console.print(table)


def _stat_text(value) -> str:
    return "-" if value is None else str(value)
