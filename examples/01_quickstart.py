from __future__ import annotations

from _infra import FakeDirectory, banner, run

from railway import either, maybe


async def main() -> None:
    banner("01_quickstart: maybe.go + either.go + collect")

    directory = FakeDirectory()

    @maybe.go
    def ada_team():
        user = yield from directory.find_user(1)
        team = yield from directory.team_name(user.team_id)
        return f"{user.name} works on {team}"

    print(ada_team.get_or("unknown"))

    @either.go_fn
    def greeting(user_id: int):
        user = yield from directory.load_user(user_id)
        return f"hello, {user.name}"

    for user_id in (2, 7):
        print(greeting(user_id).unwrap(lambda err: f"error: {err}", lambda msg: msg))

    print(either.collect([directory.load_user(1), directory.load_user(3)]).map(len))


if __name__ == "__main__":
    run(main)
