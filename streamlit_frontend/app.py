import streamlit as st
from dotenv import load_dotenv
from config.settings import get_settings
from logger.logger import LogManager, log_info
from schemas.base import NavigationPayload
from schemas.submission import ALLOWED_EXTENSIONS, FileSubmission, guess_mime_type
from services.parsing_client import ParsingClient, persistent_token_store
from workflows.intake_surface import IntakeSurface
from workflows.intake_workflow import IntakeWorkflow
from workflows.navigator import Navigator, SETUP_ROUTE, JOB_NAME_KEY

load_dotenv()
settings = get_settings()

st.set_page_config(
    page_title="Interview Setup",
    page_icon="📝",
    layout="centered"
)


@st.cache_resource
def get_parsing_client() -> ParsingClient:
    """One client for the whole server process"""
    LogManager().configure(debug=settings.DEBUG)
    return ParsingClient.from_settings(settings)


def hand_off(payload: NavigationPayload):
    st.session_state.navigation = {
        "route": SETUP_ROUTE,
        "state": payload.model_dump(by_alias=True),
    }


def new_surface() -> IntakeSurface:
    navigator = Navigator(st.session_state, handoff=hand_off)
    surface = IntakeSurface(
        IntakeWorkflow(get_parsing_client(), navigator),
        navigator,
        selected_interviewer=st.session_state.get("selectedInterviewer"),
        token_stores=(persistent_token_store(settings), st.session_state),
    )
    surface.start_session()
    return surface


def start_over():
    st.session_state.pop("navigation", None)
    st.session_state.intake_surface = new_surface()


def upload_from_streamlit(uploaded) -> FileSubmission:
    # Browsers report an empty or generic type for some files; fall back to the suffix
    mime_type = uploaded.type or guess_mime_type(uploaded.name)
    return FileSubmission(filename=uploaded.name, mime_type=mime_type, source=uploaded)


def show_outcome(outcome):
    if outcome.navigated:
        st.rerun()
    elif outcome.message:
        st.error(outcome.message)


def render_setup_step(navigation):
    state = navigation["state"]
    st.title("Interview Configuration")
    st.caption(f"Route: {navigation['route']}")
    st.markdown(f"**Job Name:** {st.session_state.get(JOB_NAME_KEY) or '-'}")

    tags = state.get("tags") or []
    if tags:
        st.markdown(" ".join(f"`{tag}`" for tag in tags))
    if state.get("selectedInterviewer") is not None:
        st.markdown(f"**Interviewer:** {state['selectedInterviewer']}")
    if state.get("jobDescription"):
        with st.expander("Job description"):
            st.text(state["jobDescription"])
    else:
        st.info("No job description provided. Configure the interview manually.")

    st.button("Back to job description", on_click=start_over)


def render_intake(surface: IntakeSurface):
    st.title("Interview Setup")

    upload_tab, write_tab, skip_tab = st.tabs(
        ["Upload job description", "Write job description", "Skip to setup page"]
    )

    with upload_tab:
        st.caption("You can upload a job description to pre-configure the interview settings.")
        uploaded = st.file_uploader("Choose File", type=list(ALLOWED_EXTENSIONS), key="jd_file")
        if st.button("Upload", key="upload_btn", disabled=surface.is_busy or uploaded is None):
            with st.spinner("Processing the job description..."):
                outcome = surface.submit_file(upload_from_streamlit(uploaded))
            show_outcome(outcome)

    with write_tab:
        st.caption("Type below the job description to preconfigure the interview settings.")
        text = st.text_area("Job description", height=400, placeholder="Enter your message...", key="jd_text")
        if st.button("Send", key="send_btn", disabled=surface.is_busy):
            with st.spinner("Processing the job description..."):
                outcome = surface.submit_text(text)
            show_outcome(outcome)

    with skip_tab:
        st.caption("Continue without a job description and configure the interview manually.")
        if st.button("Skip", key="skip_btn", disabled=surface.is_busy):
            show_outcome(surface.skip())


if "intake_surface" not in st.session_state:
    st.session_state.intake_surface = new_surface()
    log_info("Intake page opened")

if "navigation" in st.session_state:
    render_setup_step(st.session_state.navigation)
else:
    render_intake(st.session_state.intake_surface)
