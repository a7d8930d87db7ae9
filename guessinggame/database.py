"""SQLite storage for users, game history, statistics and the leaderboard."""

from __future__ import annotations

import logging
import os
import sqlite3
from dataclasses import dataclass
from typing import Optional, Union

log = logging.getLogger(__name__)

_CREATE_USERS = (
    "CREATE TABLE IF NOT EXISTS users ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "username TEXT UNIQUE NOT NULL,"
    "password_hash TEXT NOT NULL,"
    "created_at DATETIME DEFAULT CURRENT_TIMESTAMP"
    ");"
)

_CREATE_GAME_HISTORY = (
    "CREATE TABLE IF NOT EXISTS game_history ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "user_id INTEGER,"
    "target_number INTEGER NOT NULL,"
    "attempts INTEGER NOT NULL,"
    "won INTEGER NOT NULL,"
    "timestamp DATETIME DEFAULT CURRENT_TIMESTAMP,"
    "FOREIGN KEY (user_id) REFERENCES users(id)"
    ");"
)

_LEADERBOARD_SQL = (
    "SELECT u.username, "
    "MIN(CASE WHEN g.won = 1 THEN g.attempts ELSE NULL END) AS best_score, "
    "COUNT(g.id) AS games_played, "
    "SUM(CASE WHEN g.won = 1 THEN 1 ELSE 0 END) AS wins "
    "FROM users u "
    "LEFT JOIN game_history g ON u.id = g.user_id "
    "GROUP BY u.id "
    "ORDER BY best_score IS NULL, best_score ASC, wins DESC "
    "LIMIT ?;"
)


class DatabaseError(Exception):
    """Raised when the database cannot be opened or an operation fails."""


@dataclass(frozen=True)
class GameStats:
    total_games: int = 0
    wins: int = 0
    best_score: int = 0
    avg_attempts: float = 0.0


@dataclass(frozen=True)
class LeaderboardEntry:
    username: str
    best_score: int
    games_played: int
    wins: int


class Database:
    """A connection to the game's SQLite database."""

    def __init__(self, path: Union[str, os.PathLike]):
        try:
            self._conn: Optional[sqlite3.Connection] = sqlite3.connect(
                path, isolation_level=None
            )
        except sqlite3.Error as exc:
            raise DatabaseError(f"error opening database: {exc}") from exc

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        if self._conn is None:
            raise DatabaseError("database is closed")
        try:
            return self._conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def initialize(self) -> None:
        """Create the tables if they do not exist yet."""
        self._execute(_CREATE_USERS)
        self._execute(_CREATE_GAME_HISTORY)

    def create_user(self, username: str, password_hash: str) -> int:
        """Insert a user and return the new user id."""
        cursor = self._execute(
            "INSERT INTO users (username, password_hash) VALUES (?, ?);",
            (username, password_hash),
        )
        return cursor.lastrowid

    def verify_user(self, username: str, password_hash: str) -> Optional[int]:
        """Return the id of the user with these credentials, or None."""
        row = self._execute(
            "SELECT id FROM users WHERE username = ? AND password_hash = ?;",
            (username, password_hash),
        ).fetchone()
        return row[0] if row else None

    def user_exists(self, username: str) -> bool:
        row = self._execute(
            "SELECT 1 FROM users WHERE username = ?;", (username,)
        ).fetchone()
        return row is not None

    def save_game(self, user_id: int, target_number: int, attempts: int, won: bool) -> None:
        """Record a finished game; the user must exist."""
        known = self._execute("SELECT 1 FROM users WHERE id = ?;", (user_id,)).fetchone()
        if known is None:
            raise DatabaseError(f"cannot save game for non-existent user ID: {user_id}")
        self._execute(
            "INSERT INTO game_history (user_id, target_number, attempts, won) "
            "VALUES (?, ?, ?, ?);",
            (user_id, target_number, attempts, 1 if won else 0),
        )

    def _collect_stats(self, user_id: Optional[int]) -> GameStats:
        if user_id is None:
            scope, both, params = "", "WHERE won = 1", ()
        else:
            scope, both, params = (
                " WHERE user_id = ?",
                "WHERE user_id = ? AND won = 1",
                (user_id,),
            )
        total, wins = self._execute(
            "SELECT COUNT(*), SUM(CASE WHEN won = 1 THEN 1 ELSE 0 END) "
            f"FROM game_history{scope};",
            params,
        ).fetchone()
        (best,) = self._execute(
            f"SELECT MIN(attempts) FROM game_history {both};", params
        ).fetchone()
        (avg,) = self._execute(
            f"SELECT AVG(attempts) FROM game_history{scope};", params
        ).fetchone()
        return GameStats(
            total_games=total or 0,
            wins=wins or 0,
            best_score=best if best is not None else 0,
            avg_attempts=float(avg) if avg is not None else 0.0,
        )

    def stats(self) -> GameStats:
        """Statistics over every recorded game."""
        return self._collect_stats(None)

    def user_stats(self, user_id: int) -> GameStats:
        """Statistics over the games of one user."""
        return self._collect_stats(user_id)

    def leaderboard(self, limit: int = 10) -> list[LeaderboardEntry]:
        """Users ranked by best winning score, then by number of wins."""
        (game_count,) = self._execute("SELECT COUNT(*) FROM game_history;").fetchone()
        log.debug("leaderboard: %d game history entries", game_count)

        if game_count == 0:
            rows = self._execute("SELECT username FROM users LIMIT ?;", (limit,))
            return [
                LeaderboardEntry(username or "Unknown", 0, 0, 0) for (username,) in rows
            ]

        return [
            LeaderboardEntry(
                username=username or "Unknown",
                best_score=best if best is not None else 0,
                games_played=played or 0,
                wins=wins or 0,
            )
            for username, best, played, wins in self._execute(_LEADERBOARD_SQL, (limit,))
        ]

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()