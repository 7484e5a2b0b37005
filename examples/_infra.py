from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from railway import either, maybe  # noqa: E402
from railway.either import Either  # noqa: E402
from railway.maybe import Maybe  # noqa: E402


@dataclass(frozen=True, slots=True)
class Failure:
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    team_id: int | None = None


def _seed_users() -> dict[int, User]:
    return {
        1: User(id=1, name="ada", team_id=10),
        2: User(id=2, name="grace", team_id=10),
        3: User(id=3, name="linus"),
    }


@dataclass(slots=True)
class FakeDirectory:
    users: dict[int, User] = field(default_factory=_seed_users)
    teams: dict[int, str] = field(default_factory=lambda: {10: "compilers"})
    delay_seconds: float = 0.0

    def find_user(self, user_id: int) -> Maybe[User]:
        return maybe.from_optional(self.users.get(user_id))

    def load_user(self, user_id: int) -> Either[Failure, User]:
        return self.find_user(user_id).unwrap(
            lambda: either.left(Failure(f"no user {user_id}")),
            either.right,
        )

    async def fetch_user(self, user_id: int) -> Maybe[User]:
        await asyncio.sleep(self.delay_seconds * user_id)
        return self.find_user(user_id)

    def team_name(self, team_id: int | None) -> Maybe[str]:
        return maybe.from_optional(team_id).flat_map(lambda tid: maybe.from_optional(self.teams.get(tid)))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
