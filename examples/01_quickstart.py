from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok

from lazyseq import Chain, Log, chain, join_to_string, join_to_string_writer, range_to_step, repeat


def main() -> None:
    banner("01_quickstart: ranges + tap + repeat + join")

    # Locality: plain functions, each returns a restartable lazy sequence.
    countdown = range_to_step(10, 1, -3)
    print(join_to_string(repeat(countdown, 2), glue=" "))

    log: Log[str] = Log()
    text = (
        Chain.range(1, 5)
        .tap_log(log, entry=lambda n: f"visit {n}")
        .repeat(2)
        .join(prefix="<", suffix=">")
    )
    print(text)
    print(log)

    wr = join_to_string_writer(["ok", None], formatter=lambda s: s.upper())
    match wr.result:
        case Ok(message):
            print(message)
        case Error(err):
            print(f"error: {err!r}")
    print(wr.log)

    print(chain("abc").repeat(3).join(glue=""))


if __name__ == "__main__":
    run(main)
