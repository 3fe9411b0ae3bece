# This project was developed with assistance from AI tools.
"""Command line front-end for the loan support API.

Usage:
  loan-support settings show
  loan-support settings set --api-base http://localhost:8000 --token abc
  loan-support health
  loan-support ingest --path app/data/documents
  loan-support ask "What documents do I need?"
  loan-support eligibility --income 8500 --obligations 1200 --roi 7.25 --tenure 360
  loan-support serve --port 5000
"""

import argparse
import logging
import sys

from .client.api import ApiError, LoanSupportClient
from .client.storage import clear_settings, get_settings, save_settings, settings_path

logger = logging.getLogger(__name__)


def _mask(token: str) -> str:
    if not token:
        return "(not set)"
    return f"{token[:4]}{'*' * max(len(token) - 4, 4)}"


def _cmd_settings(args: argparse.Namespace) -> int:
    if args.action == "set":
        if args.api_base is None and args.token is None:
            print("Nothing to update: pass --api-base and/or --token", file=sys.stderr)
            return 1
        save_settings(api_base=args.api_base, bearer_token=args.token)
        print("Settings saved.")
    elif args.action == "clear":
        clear_settings()
        print("Settings cleared.")

    current = get_settings()
    print(f"Settings file: {settings_path()}")
    print(f"API base:      {current.api_base}")
    print(f"Bearer token:  {_mask(current.bearer_token)}")
    return 0


def _cmd_health(client: LoanSupportClient, _args: argparse.Namespace) -> int:
    data = client.check_health()
    print(f"API status: {data.get('status', 'unknown')}")
    return 0


def _cmd_ingest(client: LoanSupportClient, args: argparse.Namespace) -> int:
    data = client.ingest_documents(args.path)
    ingested = data.get("ingested", {})
    print("Ingestion complete.")
    print(f"Pages:  {ingested.get('pages', 0):,}")
    print(f"Chunks: {ingested.get('chunks', 0):,}")
    return 0


def _cmd_ask(client: LoanSupportClient, args: argparse.Namespace) -> int:
    data = client.ask_question(args.query, top_k=args.top_k)
    print(data.get("answer", ""))
    return 0


def _cmd_eligibility(client: LoanSupportClient, args: argparse.Namespace) -> int:
    payload = {
        "monthly_income": args.income,
        "monthly_obligations": args.obligations,
        "roi": args.roi,
        "tenure_months": args.tenure,
    }
    if args.loan_amount is not None:
        payload["loan_amount"] = args.loan_amount

    data = client.calculate_eligibility(payload)
    emi = data["emi"]
    print(f"EMI:                  {emi:,}")
    print(f"FOIR:                 {data['foir']}%")
    print(f"Eligible loan amount: {data['eligible_loan_amount']:,}")
    if emi < 0 or data["eligible_loan_amount"] < 0:
        print("Not affordable: existing obligations exceed the income ceiling.")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("loan_support.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


_CLIENT_COMMANDS = {
    "health": _cmd_health,
    "ingest": _cmd_ingest,
    "ask": _cmd_ask,
    "eligibility": _cmd_eligibility,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="loan-support", description="Loan support assistant")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_settings = sub.add_parser("settings", help="show or change API settings")
    p_settings.add_argument("action", choices=["show", "set", "clear"], nargs="?", default="show")
    p_settings.add_argument("--api-base", help="API base URL, e.g. http://localhost:5000")
    p_settings.add_argument("--token", help="bearer token sent as the Authorization header")

    sub.add_parser("health", help="check API health")

    p_ingest = sub.add_parser("ingest", help="ingest PDF documents")
    p_ingest.add_argument("--path", help="documents directory (server default when omitted)")

    p_ask = sub.add_parser("ask", help="ask a loan question")
    p_ask.add_argument("query")
    p_ask.add_argument("--top-k", type=int, default=5)

    p_elig = sub.add_parser("eligibility", help="calculate loan eligibility")
    p_elig.add_argument("--income", type=float, required=True, help="monthly income")
    p_elig.add_argument("--obligations", type=float, required=True, help="monthly obligations")
    p_elig.add_argument("--roi", type=float, required=True, help="annual interest rate, percent")
    p_elig.add_argument("--tenure", type=int, required=True, help="tenure in months")
    p_elig.add_argument("--loan-amount", type=float, help="desired principal")

    p_serve = sub.add_parser("serve", help="run the API server")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=5000)
    p_serve.add_argument("--reload", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "settings":
        return _cmd_settings(args)
    if args.command == "serve":
        return _cmd_serve(args)

    handler = _CLIENT_COMMANDS[args.command]
    try:
        with LoanSupportClient(get_settings()) as client:
            return handler(client, args)
    except ApiError as exc:
        logger.debug("API call failed (status=%s)", exc.status_code)
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
