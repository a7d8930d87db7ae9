# guessinggame

Building blocks for a number guessing game. The game has player accounts,
hot/cold clues, statistics and a leaderboard. The package has three
modules:

- `guessinggame.game` covers the game rules: the secret number,
  difficulty ranges and clues.
- `guessinggame.database` stores users and finished games in SQLite and
  computes statistics and a leaderboard from them.
- `guessinggame.httpmsg` parses raw HTTP requests and builds raw HTTP
  responses.

The package depends only on the standard library.

## Installation

```
pip install .
```

## Game rules (`guessinggame.game`)

- `generate_random_number(low, high)` returns a random integer in
  `[low, high]`, with both ends included. It raises `ValueError` when
  `low > high`.
- `difficulty_range(difficulty)` returns `(1, 50)` for `"easy"` and
  `(1, 200)` for `"hard"`. For anything else, including `None`, it returns
  `(1, 100)`.
- `generate_clue(guess, target, low, high)` returns `"Correct!"` for an
  exact guess. Otherwise it measures the distance as a share of the range
  and names a level: "Very hot!" within 5%, "Hot!" within 10%, "Warm."
  within 20%, "Cool." within 40%, and "Cold!" beyond that. The level is
  followed by "The number is higher." or "The number is lower."

```python
from guessinggame.game import generate_clue

print(generate_clue(40, 42, 1, 100))  # Very hot! The number is higher.
```

## Storage (`guessinggame.database`)

`Database(path)` opens an SQLite database. You can pass `":memory:"` for
a database that lives only in memory. It works as a context manager and
closes on exit. If the database cannot be opened, or a statement fails,
it raises `DatabaseError`.

- `initialize()` creates the `users` and `game_history` tables.
- `create_user(username, password_hash)` inserts a user and returns the
  new id. A username that already exists raises `DatabaseError`.
- `verify_user(username, password_hash)` returns the user's id, or
  `None` if no user matches.
- `user_exists(username)` returns whether a user with that name exists.
- `save_game(user_id, target_number, attempts, won)` records a finished
  game. It raises `DatabaseError` if the user does not exist.
- `stats()` and `user_stats(user_id)` return a `GameStats` with
  `total_games`, `wins`, `best_score` (the fewest attempts in a won game,
  or 0) and `avg_attempts`.
- `leaderboard(limit=10)` returns `LeaderboardEntry` items with
  `username`, `best_score`, `games_played` and `wins`. Users are ranked
  by best score, and users with no wins come last; ties go to the player
  with more wins. If no games have been recorded yet, it lists users with
  zero values.

```python
from guessinggame.database import Database

password_hash = "placeholder"

with Database(":memory:") as db:
    db.initialize()
    user_id = db.create_user("alice", password_hash)
    assert db.verify_user("alice", password_hash) == user_id
    db.save_game(user_id, 42, 5, True)
    print(db.user_stats(user_id))
    print(db.leaderboard(10))
```

The database stores whatever string you pass as `password_hash`. Hashing
passwords is up to the caller.

## HTTP messages (`guessinggame.httpmsg`)

- `parse_http_request(raw)` takes bytes or a string and returns an
  `HttpRequest` with `method`, `path`, `headers`, `query_params` and
  `body`.
  - A query parameter without `=` is ignored.
  - Query values are not percent-decoded.
  - The body is read only when a `Content-Length` header is present, and
    a malformed length raises `ValueError`.
- `json_response(body)` builds a `200 OK` response as bytes, carrying
  JSON text and `Access-Control-Allow-Origin: *`.
- `content_response(content, content_type)` builds a `200 OK` response as
  bytes, carrying the given content and content type.
- `not_found_response()` builds a `404 Not Found` response as bytes, with
  a small HTML page.

## What the package does not do

The package has no HTTP server and no command to start one. It does not
route requests to the game, serve the game's pages, or parse and build
the game's JSON API messages. It has no password hashing either. The
modules above are the pieces such a server would be built from.

## Running the tests

```
pip install ".[test]"
pytest
```