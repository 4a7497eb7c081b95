import argparse
import asyncio
import json
import os
import sys

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "backend")))

from seo_auditor.config import settings
from seo_auditor.exceptions import AuditorError
from seo_auditor.schemas.audit_request import RemediationContext, RemediationIssue
from seo_auditor.services.audit_runner import AuditRunner
from seo_auditor.services.remediation.engine import RemediationEngine


def parse_issue(arg: str) -> RemediationIssue:
    """CHECK_ID or CHECK_ID=instruction"""
    check_id, _, instruction = arg.partition("=")
    return RemediationIssue(check_id=check_id, fix_instruction=instruction)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Checklist SEO audit and remediation")
    commands = parser.add_subparsers(dest="command", required=True)

    audit_cmd = commands.add_parser("audit", help="Audit a URL and print the report as JSON")
    audit_cmd.add_argument("url", help="URL or bare host, e.g. example.com")

    fix_cmd = commands.add_parser("fix", help="Apply safe fixes to an HTML file")
    fix_cmd.add_argument("file", help="HTML file to patch in place")
    fix_cmd.add_argument("issues", nargs="+", help="CHECK_ID or CHECK_ID=instruction")
    fix_cmd.add_argument("--site-id", help="Domain for canonical and og:url")
    fix_cmd.add_argument("--display-name", help="Business name for titles and descriptions")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "audit":
            result = asyncio.run(AuditRunner().run(args.url))
            print(json.dumps(result.model_dump(), indent=2))
        else:
            context = RemediationContext(site_id=args.site_id, display_name=args.display_name)
            issues = [parse_issue(arg) for arg in args.issues]
            engine = RemediationEngine(root=settings.REMEDIATION_ROOT or None)
            outcome = engine.remediate(args.file, issues, context)
            print(json.dumps({"status": "success", "file": args.file, **outcome.model_dump()}, indent=2))
    except AuditorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
