import statistics

import pytest

from guessinggame.database import Database, DatabaseError, GameStats, LeaderboardEntry


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "game.db")
    database.initialize()
    yield database
    database.close()


def test_open_in_missing_directory_raises(tmp_path):
    with pytest.raises(DatabaseError):
        Database(tmp_path / "missing" / "game.db")


def test_initialize_is_idempotent(db):
    db.initialize()
    user_id = db.create_user("alice", "hash")
    assert db.verify_user("alice", "hash") == user_id


def test_create_and_verify_user(db):
    user_id = db.create_user("alice", "hash-a")
    assert user_id >= 1
    assert db.verify_user("alice", "hash-a") == user_id
    assert db.verify_user("alice", "wrong") is None
    assert db.verify_user("bob", "hash-a") is None


def test_duplicate_username_raises(db):
    db.create_user("alice", "hash-a")
    with pytest.raises(DatabaseError):
        db.create_user("alice", "hash-b")


def test_user_exists(db):
    assert db.user_exists("alice") is False
    db.create_user("alice", "hash")
    assert db.user_exists("alice") is True


def test_save_game_for_unknown_user_raises(db):
    with pytest.raises(DatabaseError):
        db.save_game(42, 10, 3, True)
    assert db.stats() == GameStats()


def test_empty_stats(db):
    assert db.stats() == GameStats(0, 0, 0, 0.0)


def test_global_stats(db):
    alice = db.create_user("alice", "h")
    bob = db.create_user("bob", "h")
    games = [(alice, 50, 5, True), (bob, 20, 3, True), (alice, 70, 10, False)]
    for game in games:
        db.save_game(*game)

    stats = db.stats()
    assert stats.total_games == len(games)
    assert stats.wins == sum(1 for g in games if g[3])
    assert stats.best_score == min(g[2] for g in games if g[3])
    assert stats.avg_attempts == pytest.approx(statistics.mean(g[2] for g in games))


def test_user_stats_only_count_that_user(db):
    alice = db.create_user("alice", "h")
    bob = db.create_user("bob", "h")
    db.save_game(alice, 50, 7, True)
    db.save_game(alice, 60, 4, False)
    db.save_game(bob, 20, 2, True)

    stats = db.user_stats(alice)
    assert stats.total_games == 2
    assert stats.wins == 1
    assert stats.best_score == 7
    assert stats.avg_attempts == pytest.approx(statistics.mean([7, 4]))
    assert db.user_stats(9999) == GameStats()


def test_user_stats_without_wins_has_zero_best(db):
    alice = db.create_user("alice", "h")
    db.save_game(alice, 50, 9, False)
    assert db.user_stats(alice).best_score == 0


def test_leaderboard_without_games_lists_users(db):
    for name in ["alice", "bob", "carol"]:
        db.create_user(name, "h")
    board = db.leaderboard(10)
    assert [e.username for e in board] == ["alice", "bob", "carol"]
    assert all(e == LeaderboardEntry(e.username, 0, 0, 0) for e in board)
    assert len(db.leaderboard(2)) == 2


def test_leaderboard_ordering(db):
    alice = db.create_user("alice", "h")
    bob = db.create_user("bob", "h")
    carol = db.create_user("carol", "h")
    dave = db.create_user("dave", "h")
    db.save_game(alice, 10, 6, True)
    db.save_game(bob, 10, 3, True)
    db.save_game(carol, 10, 6, True)
    db.save_game(carol, 10, 8, True)
    db.save_game(dave, 10, 2, False)

    board = db.leaderboard(10)
    assert [e.username for e in board] == ["bob", "carol", "alice", "dave"]
    assert board[0] == LeaderboardEntry("bob", 3, 1, 1)
    assert board[1] == LeaderboardEntry("carol", 6, 2, 2)
    assert board[-1] == LeaderboardEntry("dave", 0, 1, 0)


def test_leaderboard_limit(db):
    for name in ["a", "b", "c"]:
        user = db.create_user(name, "h")
        db.save_game(user, 5, 4, True)
    assert len(db.leaderboard(1)) == 1
    assert len(db.leaderboard()) == 3


def test_closed_database_raises(tmp_path):
    database = Database(tmp_path / "game.db")
    database.initialize()
    database.close()
    with pytest.raises(DatabaseError):
        database.user_exists("alice")


def test_context_manager_closes(tmp_path):
    with Database(tmp_path / "game.db") as database:
        database.initialize()
        database.create_user("alice", "h")
    with pytest.raises(DatabaseError):
        database.stats()


def test_data_persists_across_connections(tmp_path):
    path = tmp_path / "game.db"
    with Database(path) as first:
        first.initialize()
        user_id = first.create_user("alice", "h")
        first.save_game(user_id, 30, 4, True)
    with Database(path) as second:
        second.initialize()
        assert second.verify_user("alice", "h") == user_id
        assert second.user_stats(user_id).total_games == 1