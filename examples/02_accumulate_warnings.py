from __future__ import annotations

from _infra import banner, run

from railway import these


def parse_port(raw: str):
    """Parse a port, falling back to 8080 with a warning instead of failing."""
    if not raw:
        return these.both(["port missing, using 8080"], 8080)
    if not raw.isdigit():
        return these.first([f"port {raw!r} is not a number"])
    return these.second(int(raw))


async def main() -> None:
    banner("02_accumulate_warnings: these.go keeps going past warnings")

    @these.go
    def config():
        port = yield from parse_port("")
        backup = yield from parse_port("9090")
        return {"port": port, "backup": backup}

    print(config)

    @these.go
    def broken():
        yield from parse_port("")
        yield from parse_port("http")
        return {}

    print(broken)

    print(these.traverse(["", "80", ""], lambda raw, _: parse_port(raw)))


if __name__ == "__main__":
    run(main)
