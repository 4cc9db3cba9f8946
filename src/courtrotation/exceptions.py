"""Exceptions for use in Court Rotation"""

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


# ========== Base Application Exception ==========


class CourtRotationException(Exception):
    """Base exception for all Court Rotation errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every engine error with a single except clause.
    """

    pass


# ========== Scheduling Exceptions ==========


class SchedulingException(CourtRotationException):
    """Base exception for round scheduling errors."""

    pass


class InvalidRoundException(SchedulingException):
    """Raised when the inputs for a round cannot describe a valid session."""

    pass


class InvalidPolicyException(SchedulingException):
    """Raised when a rotation policy name is not recognised."""

    pass


class RoundInProgressException(SchedulingException):
    """Raised when a new round is requested while games are still open."""

    def __init__(self, round_number: int, open_games: int):
        self.round_number = round_number
        self.open_games = open_games
        super().__init__(
            f"Cannot start round {round_number}: "
            f"{open_games} game(s) still pending or in progress"
        )


# ========== Balancing Exceptions ==========


class BalancingException(CourtRotationException):
    """Base exception for team balancing errors."""

    pass


class InsufficientPlayersException(BalancingException):
    """Raised when there are not enough players to fill two rosters per court."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"Need at least {required} players, only {available} available"
        )


# ========== Result Exceptions ==========


class ResultException(CourtRotationException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a score line cannot produce a winner."""

    pass


class GameNotFoundException(ResultException):
    """Raised when a result references a game that does not exist."""

    pass
