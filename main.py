import argparse
import json
import sys
from config.settings import get_settings
from schemas.submission import FileSubmission
from services.parsing_client import ParsingClient, persistent_token_store
from workflows.intake_surface import IntakeSurface
from workflows.intake_workflow import IntakeWorkflow
from workflows.navigator import Navigator, SETUP_ROUTE
from logger import LogManager, log_debug, log_info
import dotenv
dotenv.load_dotenv()

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Job description intake for interview setup")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="Path to a PDF or DOCX job description")
    source.add_argument("--text", help="Job description text")
    source.add_argument("--skip", action="store_true", help="Skip straight to manual setup")
    parser.add_argument("--interviewer", help="Interviewer chosen beforehand, passed through as-is")
    parser.add_argument("--token", help="Bearer token used when the environment has none")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    return parser

def main(argv=None, client: ParsingClient = None) -> int:
    settings = get_settings()
    args = build_parser().parse_args(argv)

    LogManager().configure(debug=args.debug or settings.DEBUG)
    log_info("Starting job description intake", api_url=settings.API_URL)

    session = {"authToken": args.token} if args.token else {}
    navigator = Navigator(session)
    surface = IntakeSurface(
        IntakeWorkflow(client or ParsingClient.from_settings(settings), navigator),
        navigator,
        selected_interviewer=args.interviewer,
        token_stores=(persistent_token_store(settings), session),
    )
    surface.start_session()

    if args.skip:
        outcome = surface.skip()
    elif args.file:
        outcome = surface.submit_file(FileSubmission.from_path(args.file))
    else:
        outcome = surface.submit_text(args.text)

    log_debug("Intake finished", phase=outcome.phase.value)
    if outcome.navigated:
        print(json.dumps({
            "route": SETUP_ROUTE,
            "jobName": session.get("jobName", ""),
            "state": outcome.payload.model_dump(by_alias=True),
        }, indent=2))
        return 0

    print(json.dumps({"error": outcome.message}, indent=2))
    return 1

if __name__ == "__main__":
    sys.exit(main())
