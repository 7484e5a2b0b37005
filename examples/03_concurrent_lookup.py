from __future__ import annotations

from _infra import FakeDirectory, banner, run

from kungfu import Error, Ok

from railway import ParPolicy, either, maybe


async def main() -> None:
    banner("03_concurrent_lookup: *_par traversals + kungfu bridge")

    directory = FakeDirectory(delay_seconds=0.01)

    # Handlers run concurrently; the result keeps input order
    users = await maybe.traverse_par([3, 1, 2], lambda uid, _: directory.fetch_user(uid))
    print(users.map(lambda us: [u.name for u in us]))

    # First miss wins; the remaining lookups are cancelled
    missing = await maybe.traverse_par(
        [1, 99, 2],
        lambda uid, _: directory.fetch_user(uid),
        policy=ParPolicy(cancel_pending=True),
    )
    print(missing)

    async def body(bind):
        user = await bind(directory.load_user(2))
        team = await bind(directory.team_name(user.team_id).to_result(error=lambda: "no team"))
        return f"{user.name}@{team}"

    match await either.go_lazy(body):
        case Ok(value):
            print(value)
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    run(main)
