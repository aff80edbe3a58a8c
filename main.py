"""
Main entrypoint: run the API server, or run the qualification workflow once.

    python main.py serve [--host 0.0.0.0] [--port 8000]
    python main.py workflow --vendor-id 999 --score 85 --threshold 80 --salt 12345

`workflow` runs verify -> compliance -> record -> status on a fresh simulated
engine and prints every envelope as JSON.

Env: API_HOST, API_PORT, LOG_LEVEL, QUALIFICATION_BACKEND, CONTRACT_ADDRESS, etc.

API-only: uvicorn vendor_qualification.api_server.app:app --host 0.0.0.0 --port 8000
"""

import argparse
import json
import os
import sys

# Configure structured JSON logging before other imports that may log
from vendor_qualification.qualification_logging import get_logger

logger = get_logger("main")


def _serve(args: argparse.Namespace) -> int:
    from vendor_qualification.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=args.host, port=args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=os.getenv("LOG_LEVEL", "info").lower())
    return 0


def _workflow(args: argparse.Namespace) -> int:
    from vendor_qualification.engine import QualificationEngine, run_qualification_workflow

    engine = QualificationEngine()
    result = run_qualification_workflow(
        engine,
        args.vendor_id,
        args.score,
        args.threshold,
        args.salt,
        certification_valid=not args.no_certification,
        insurance_active=not args.no_insurance,
        payment_history_good=not args.no_payment_history,
    )
    out = result.to_dict()
    out["contract"] = engine.contract_config()
    print(json.dumps(out, indent=2, ensure_ascii=False))
    return 0 if result.qualified else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vendor qualification engine")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=os.getenv("API_HOST", "0.0.0.0").strip())
    serve.add_argument("--port", type=int, default=int(os.getenv("API_PORT", "8000").strip() or "8000"))
    serve.set_defaults(func=_serve)

    wf = sub.add_parser("workflow", help="Run verify -> compliance -> record -> status once")
    wf.add_argument("--vendor-id", type=int, required=True)
    wf.add_argument("--score", type=int, required=True)
    wf.add_argument("--threshold", type=int, required=True)
    wf.add_argument("--salt", type=int, default=0)
    wf.add_argument("--no-certification", action="store_true", help="Certification is not valid")
    wf.add_argument("--no-insurance", action="store_true", help="Insurance is not active")
    wf.add_argument("--no-payment-history", action="store_true", help="Payment history is not good")
    wf.set_defaults(func=_workflow)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    for name in ("vendor_id", "score", "threshold"):
        if getattr(args, name, 0) < 0:
            logger.error("main_config_error", message=f"--{name.replace('_', '-')} must be non-negative")
            return 2
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
