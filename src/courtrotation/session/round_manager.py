"""Round management for play sessions.

This module plays the caller's role around the pure round scheduler: it
keeps the game log, refuses to open a round while games are still running,
turns matchups into games and feeds results back into ratings.
"""

# Court Rotation
# Copyright (C) 2025  Court Rotation developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Dict, List, Optional, Sequence, Tuple

from courtrotation.exceptions import (
    GameNotFoundException,
    InvalidRoundException,
    ResultException,
    RoundInProgressException,
)
from courtrotation.models.enums import RotationPolicy
from courtrotation.models.game import Game
from courtrotation.models.round import RotationResult
from courtrotation.models.session_config import SessionConfig
from courtrotation.models.team import SessionTeam
from courtrotation.rating.elo import RatingChange
from courtrotation.rotation.scheduler import next_round
from courtrotation.session.result_recorder import ResultRecorder
from courtrotation.standings import calculate_standings, is_round_robin_complete
from courtrotation.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and game records for one session.

    This class is responsible for:
    - Generating the next round with the session's rotation policy
    - Enforcing that a round only starts once every game is completed
    - Keeping the game log and the round counter
    - Recording results and applying ratings
    """

    def __init__(
        self,
        config: SessionConfig,
        teams: Sequence[SessionTeam],
        games: Optional[Sequence[Game]] = None,
    ):
        """Initialize the round manager.

        Args:
            config: Session configuration (courts, rotation policy)
            teams: Session teams in tie-break order
            games: Existing game log, if resuming a session
        """
        self.config = config
        self.teams: List[SessionTeam] = list(teams)
        self.games: List[Game] = list(games or [])
        self.recorder = ResultRecorder(config.rotation_policy)
        self.benched: List[SessionTeam] = []
        self.last_result: Optional[RotationResult] = None
        self.current_round: int = (
            max((g.round_number for g in self.games), default=0) + 1
        )

    @property
    def policy(self) -> RotationPolicy:
        return RotationPolicy.from_value(self.config.rotation_policy)

    @property
    def teams_by_id(self) -> Dict[str, SessionTeam]:
        return {team.id: team for team in self.teams}

    @property
    def open_games(self) -> List[Game]:
        """Games still pending or in progress."""
        return [g for g in self.games if g.is_open]

    @property
    def completed_games(self) -> List[Game]:
        return [g for g in self.games if g.is_completed]

    @property
    def can_generate_next_round(self) -> bool:
        return not self.open_games

    def games_for_round(self, round_number: int) -> List[Game]:
        return [g for g in self.games if g.round_number == round_number]

    def get_game(self, game_id: str) -> Game:
        for game in self.games:
            if game.id == game_id:
                return game
        raise GameNotFoundException(f"No game with id {game_id}")

    def preview_next_round(self) -> RotationResult:
        """Matchups the next call to :meth:`create_next_round` would produce."""
        return next_round(
            self.teams,
            self.completed_games,
            self.policy,
            self.config.court_count,
            self.current_round,
        )

    def create_next_round(self) -> List[Game]:
        """Generate the next round and add its games to the log.

        Returns:
            The new pending games; empty when no matchup is available, in
            which case the round counter does not move

        Raises:
            RoundInProgressException: If any game is still pending or in
                progress
        """
        open_games = self.open_games
        if open_games:
            raise RoundInProgressException(self.current_round, len(open_games))

        result = self.preview_next_round()
        if result.is_empty:
            if self.is_complete():
                logger.info("Round robin complete, every team has played every other")
            else:
                logger.warning(
                    f"No valid matchups available for round {self.current_round}"
                )
            return []

        new_games = [
            Game(
                team_a_id=matchup.team_a.id,
                team_b_id=matchup.team_b.id,
                court_number=matchup.court_number,
                round_number=self.current_round,
            )
            for matchup in result.matchups
        ]
        self.games.extend(new_games)
        self.benched = list(result.benched)
        self.last_result = result

        logger.info(
            f"Created round {self.current_round}: {len(new_games)} game(s), "
            f"{len(self.benched)} team(s) waiting"
        )
        self.current_round += 1
        return new_games

    def start_game(self, game_id: str) -> Game:
        """Mark a pending game as in progress."""
        started = self.get_game(game_id).start()
        self._replace_game(started)
        return started

    def record_result(
        self, game_id: str, score_a: int, score_b: int
    ) -> List[RatingChange]:
        """Record the final score of a game and update the players.

        Raises:
            GameNotFoundException: If the game or one of its teams is unknown
            InvalidResultException: If the score cannot be recorded
        """
        game = self.get_game(game_id)
        teams = self.teams_by_id
        team_a = teams.get(game.team_a_id)
        team_b = teams.get(game.team_b_id)
        if team_a is None or team_b is None:
            raise GameNotFoundException(
                f"Game {game_id} references a team outside this session"
            )

        completed, changes = self.recorder.record_result(
            game, score_a, score_b, team_a.players, team_b.players, self.policy
        )
        self._replace_game(completed)
        return changes

    def record_round_results(self, results: Sequence[Tuple[str, int, int]]) -> bool:
        """Record several results at once.

        Args:
            results: List of (game_id, score_a, score_b) tuples

        Returns:
            True if every result was recorded, False if any was rejected
        """
        success = True
        for game_id, score_a, score_b in results:
            try:
                self.record_result(game_id, score_a, score_b)
            except ResultException as e:
                logger.error(f"Could not record result for game {game_id}: {e}")
                success = False
        return success

    def undo_last_round(self) -> bool:
        """Remove the last round if none of its games has been completed.

        Returns:
            True if successful, False if there is no round or a result exists
        """
        last_round = self.current_round - 1
        if last_round < 1:
            logger.warning("Cannot undo: no rounds exist")
            return False

        round_games = self.games_for_round(last_round)
        if any(g.is_completed for g in round_games):
            logger.warning(f"Cannot undo round {last_round}: results recorded")
            return False

        self.games = [g for g in self.games if g.round_number != last_round]
        self.benched = []
        self.last_result = None
        self.current_round = last_round
        logger.info(f"Undid round {last_round}")
        return True

    def set_court_count(self, court_count: int) -> None:
        """Change the number of courts used from the next round on."""
        if court_count < 1:
            raise InvalidRoundException(
                f"Court count must be positive, got {court_count}"
            )
        self.config.court_count = court_count

    def standings(self) -> List[SessionTeam]:
        return calculate_standings(self.teams, self.games)

    def is_complete(self) -> bool:
        """True when a round robin session has no pairing left to play."""
        if self.policy != RotationPolicy.ROUND_ROBIN:
            return False
        return is_round_robin_complete(self.teams, self.games)

    def _replace_game(self, updated: Game) -> None:
        self.games = [updated if g.id == updated.id else g for g in self.games]
