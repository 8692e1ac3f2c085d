import argparse
import json
import logging
import sys

from job_matcher.catalog import StaticJobCatalog, sample_catalog
from job_matcher.config_loader import load_config
from job_matcher.exceptions import MatchingException
from job_matcher.models import Profile
from job_matcher.service import MatchingService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_profile(path: str) -> Profile:
    """Load an extracted profile JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return Profile.from_dict(json.load(f))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resume-to-job matching driver")
    parser.add_argument('--profile', type=str,
                        help='Path to the extracted profile JSON (skills, rawText, yearsOfExperience)')
    parser.add_argument('--policy', type=str, choices=['basic', 'advanced'], default='advanced',
                        help='Scoring policy: advanced (default) or basic')
    parser.add_argument('--industry', type=str, default=None,
                        help='Only rank jobs in this industry (case-insensitive)')
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Matching configuration file')
    parser.add_argument('--catalog', type=str, default=None,
                        help='YAML job catalog; defaults to the built-in sample catalog')
    parser.add_argument('--compare', action='store_true',
                        help='Run both policies and print them side by side')
    parser.add_argument('--algorithms', action='store_true',
                        help='Describe the available scoring policies and exit')
    return parser


def run(args: argparse.Namespace) -> dict:
    config = load_config(args.config)
    catalog = StaticJobCatalog.from_yaml(args.catalog) if args.catalog else sample_catalog()
    service = MatchingService(config, catalog)

    if args.algorithms:
        return service.describe_algorithms()

    if not args.profile:
        raise MatchingException("--profile is required unless --algorithms is given")

    profile = load_profile(args.profile)
    logger.info(f"Matching profile with {len(profile.skills)} skills (industry={args.industry!r})")

    if args.compare:
        results = service.compare_match(profile, args.industry)
        return {name: result.to_dict() for name, result in results.items()}

    return service.match(profile, args.industry, args.policy).to_dict()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        output = run(args)
    except MatchingException as e:
        logger.error(f"Matching failed: {e}")
        return 1

    json.dump(output, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
