"""Dev CLI for mongo-nlq. Usage: python -m mongo_nlq <question>"""

from __future__ import annotations

import asyncio
import sys


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python -m mongo_nlq <question>", file=sys.stderr)
        sys.exit(1)

    question = " ".join(sys.argv[1:])
    try:
        result = asyncio.run(_run(question))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(result.model_dump_json(by_alias=True, indent=2))


async def _run(question: str):
    from mongo_nlq import ask
    from mongo_nlq.config import load_config

    config = load_config()
    return await ask(question, config=config)


if __name__ == "__main__":
    main()
