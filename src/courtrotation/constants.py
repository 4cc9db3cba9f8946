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

# --- Logging ---
PACKAGE_LOGGER = "courtrotation"
LOG_LEVEL_ENV_VAR = "COURTROTATION_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# --- Ratings ---
K_FACTOR = 32
INITIAL_RATING = 1500
RATING_SCALE = 400.0

# Balance score: fairness drops one percent per 10 rating points of difference
FAIRNESS_POINTS_PER_PERCENT = 10.0

# --- Courts and teams ---
TEAMS_PER_COURT = 2
DEFAULT_TEAM_SIZE = 6
DEFAULT_COURT_COUNT = 2

TEAM_COLORS = [
    "#ef4444",
    "#f97316",
    "#eab308",
    "#22c55e",
    "#14b8a6",
    "#3b82f6",
    "#8b5cf6",
    "#ec4899",
    "#6b7280",
    "#78716c",
]

# Roster sides
SIDE_A = "A"
SIDE_B = "B"

# Game lifecycle
STATUS_PENDING = "pending"
STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"

# --- Player positions ---
POSITION_SETTER = "setter"
POSITION_OUTSIDE = "outside"
POSITION_MIDDLE = "middle"
POSITION_OPPOSITE = "opposite"
POSITION_LIBERO = "libero"
POSITION_ANY = "any"

PLAYER_POSITIONS = (
    POSITION_SETTER,
    POSITION_OUTSIDE,
    POSITION_MIDDLE,
    POSITION_OPPOSITE,
    POSITION_LIBERO,
    POSITION_ANY,
)

# Order in which positions are spread across rosters
POSITION_DISTRIBUTION_ORDER = (
    POSITION_SETTER,
    POSITION_LIBERO,
    POSITION_OUTSIDE,
    POSITION_MIDDLE,
    POSITION_OPPOSITE,
    POSITION_ANY,
)

# --- Rotation policies ---
POLICY_KING_OF_COURT = "king_of_court"
POLICY_ROUND_ROBIN = "round_robin"
POLICY_SWISS = "swiss"
POLICY_SPEED = "speed"
POLICY_MANUAL = "manual"

POLICY_NAMES = {
    POLICY_KING_OF_COURT: "King of the Court",
    POLICY_ROUND_ROBIN: "Round Robin",
    POLICY_SWISS: "Swiss (Winners vs Winners)",
    POLICY_SPEED: "Speed Mode",
    POLICY_MANUAL: "Manual",
}

POLICY_DESCRIPTIONS = {
    POLICY_KING_OF_COURT: "Winners stay on court, losers rotate to bench",
    POLICY_ROUND_ROBIN: "Every team plays every other team once",
    POLICY_SWISS: "Teams with similar records play each other",
    POLICY_SPEED: (
        "Rapid rotation, no rating changes - losers run off, next team runs on"
    ),
    POLICY_MANUAL: "Manually assign matchups each round",
}

DEFAULT_POLICY = POLICY_KING_OF_COURT
