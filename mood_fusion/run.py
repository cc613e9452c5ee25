import argparse
import json
import sys

from mood_fusion.inference.fusion import fuse_moods
from mood_fusion.inference.inputs import build_mood_input
from mood_fusion.utils.config import DEFAULT_SOURCE

# CLI wrapper: python -m mood_fusion.run calm:0.9 excited:0.8 "😢:0.5:2:voice"


def parse_token(token: str, default_source: str = DEFAULT_SOURCE):
    """Parse ``mood[:confidence[:weight[:source]]]`` into a MoodInput."""
    parts = token.split(":")
    if len(parts) > 4 or not parts[0]:
        raise ValueError(f"Expected mood[:confidence[:weight[:source]]], got {token!r}")
    confidence = float(parts[1]) if len(parts) > 1 and parts[1] else 1.0
    weight = float(parts[2]) if len(parts) > 2 and parts[2] else 1.0
    source = parts[3] if len(parts) > 3 and parts[3] else default_source
    return build_mood_input(parts[0], confidence, weight, source)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Fuse mood observations into one valence/arousal estimate")
    parser.add_argument("moods", nargs="*", help="Mood tokens as mood[:confidence[:weight[:source]]]")
    parser.add_argument("--source", type=str, default=DEFAULT_SOURCE, help="Default source for tokens without one")
    args = parser.parse_args(argv)

    try:
        inputs = [parse_token(m, args.source) for m in args.moods]
    except ValueError as e:
        print(f"Invalid mood argument: {e}", file=sys.stderr)
        sys.exit(2)

    res = fuse_moods(inputs)
    print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
    return res


if __name__ == "__main__":
    main()
