"""
Run ATCF / coordination assessments on the sample agents and print JSON.

Usage:
    python -m coordination_framework.scripts.assess_agents list
    python -m coordination_framework.scripts.assess_agents coherence agent1
    python -m coordination_framework.scripts.assess_agents coherence agent2 --no-cultural
    python -m coordination_framework.scripts.assess_agents coordination agent1 agent2 --now 2026-01-01T00:00:00+00:00
"""

import argparse
import json
import sys
from dataclasses import asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from coordination_framework.core.exceptions import UnknownSampleAgentError
from coordination_framework.core.logging_config import configure_logging
from coordination_framework.data.sample_agents import get_sample_agent, list_sample_agents
from coordination_framework.scoring.coherence_calculator import CoherenceScorer
from coordination_framework.scoring.coordination_calculator import CoordinationScorer


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(_to_jsonable(k)): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


def result_to_dict(result: Any) -> dict:
    """Flatten a result dataclass into JSON-safe primitives."""
    return _to_jsonable(asdict(result))


def _parse_now(raw: Optional[str]) -> datetime:
    if raw is None:
        return datetime.now(timezone.utc)
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--now", help="Reference time (ISO 8601); defaults to now")

    parser = argparse.ArgumentParser(description="Assess sample agents")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List sample agents")

    coherence = sub.add_parser("coherence", parents=[common], help="ATCF score for one agent")
    coherence.add_argument("agent")
    coherence.add_argument(
        "--no-cultural", action="store_true",
        help="Use base weights instead of culturally adapted ones",
    )

    coordination = sub.add_parser(
        "coordination", parents=[common], help="Coordination assessment for two agents"
    )
    coordination.add_argument("agent_a")
    coordination.add_argument("agent_b")
    coordination.add_argument("--task", default="collaboration_demo", help="Task context label")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    configure_logging()
    args = build_parser().parse_args(argv)

    if args.command == "list":
        print(json.dumps(list_sample_agents(), indent=2))
        return 0

    now = _parse_now(args.now)
    try:
        if args.command == "coherence":
            agent = get_sample_agent(args.agent, now=now)
            scorer = CoherenceScorer()
            if args.no_cultural:
                result = scorer.score(agent, now=now)
            else:
                result = scorer.score_culturally_adapted(agent, now=now)
        else:
            agent_a = get_sample_agent(args.agent_a, now=now)
            agent_b = get_sample_agent(args.agent_b, now=now)
            result = CoordinationScorer().assess(
                agent_a, agent_b, context={"task": args.task}, now=now
            )
    except UnknownSampleAgentError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(result_to_dict(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
