import streamlit as st

from wordle_marathon.config import GameConfig
from wordle_marathon.errors import InvalidGuess, NoCandidates, SourceUnavailable
from wordle_marathon.marathon import Marathon
from wordle_marathon.round import Round, RoundState
from wordle_marathon.scoring import letter_summary
from wordle_marathon.turn_loop import outcome_message
from wordle_marathon.words import WordSource

# Run with: streamlit run wordle_marathon/app.py

MODES = ["Single round", "Marathon"]
KEYBOARD_ROWS = ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"]


# Helper Functions
@st.cache_resource
def get_config() -> GameConfig:
    return GameConfig.from_env()


@st.cache_resource  # one rng per server process
def get_source() -> WordSource:
    return get_config().word_source()


def new_game(mode: str):
    """Sets up a fresh round, or a fresh marathon and its first round."""
    config = get_config()
    source = get_source()
    st.session_state.marathon = None
    st.session_state.round = None
    st.session_state.status = ""
    st.session_state.error = ""

    if mode == "Marathon":
        marathon = Marathon(source, config.base_length, config.attempt_limit)
        st.session_state.marathon = marathon
        st.session_state.round = marathon.start_round()
        if st.session_state.round is None:
            st.session_state.status = marathon.final_message().strip()
        return

    try:
        candidates = source.load_candidates()
    except (SourceUnavailable, NoCandidates) as e:
        st.session_state.error = str(e)
        return
    target = source.select_target(candidates)
    st.session_state.round = Round(target, candidates, config.attempt_limit, source.is_legal)


def finish_if_over(rnd: Round):
    if not rnd.is_over:
        return
    st.session_state.status = outcome_message(rnd)
    marathon = st.session_state.marathon
    if marathon is not None:
        marathon.finish_round(rnd.state)
        if marathon.is_over:
            st.session_state.status += marathon.final_message()


def submit_guess():
    rnd = st.session_state.round
    guess = st.session_state.guess
    st.session_state.guess = ""
    if rnd is None or rnd.is_over or not guess.strip():
        return
    try:
        rnd.submit(guess)
    except InvalidGuess as e:
        st.session_state.status = str(e)
        return
    st.session_state.status = ""
    finish_if_over(rnd)


def give_up():
    rnd = st.session_state.round
    if rnd is None or rnd.is_over:
        return
    rnd.quit()
    finish_if_over(rnd)


def next_round():
    marathon = st.session_state.marathon
    st.session_state.status = ""
    st.session_state.round = marathon.start_round()
    if st.session_state.round is None:
        st.session_state.status = marathon.final_message().strip()


def display_guess_grid(rnd: Round):
    st.markdown("""
        <style>
            .tile {
                display: inline-flex;
                justify-content: center;
                align-items: center;
                width: 50px;
                height: 50px;
                border: 2px solid #d3d6da;
                margin: 2px;
                font-size: 2em;
                font-weight: bold;
                text-transform: uppercase;
                color: white; /* Letter color */
            }
            .tile[data-state="G"] { background-color: #6aaa64; border-color: #6aaa64; }
            .tile[data-state="Y"] { background-color: #c9b458; border-color: #c9b458; }
            .tile[data-state="X"] { background-color: #787c7e; border-color: #787c7e; }
            .tile[data-state="empty"] { background-color: white; border-color: #d3d6da; }
            .key {
                display: inline-block;
                min-width: 28px;
                padding: 4px;
                margin: 2px;
                text-align: center;
                font-weight: bold;
                border-radius: 4px;
                background-color: #d3d6da;
            }
            .key[data-state="G"] { background-color: #6aaa64; color: white; }
            .key[data-state="Y"] { background-color: #c9b458; color: white; }
            .key[data-state="X"] { background-color: #787c7e; color: white; }
        </style>
    """, unsafe_allow_html=True)

    rows = []
    for scored in rnd.history:
        rows.append("".join(f'<div class="tile" data-state="{hint.value}">{letter}</div>'
                            for letter, hint in scored))
    # Empty rows for the guesses still available
    for _ in range(rnd.remaining if not rnd.is_over else 0):
        rows.append('<div class="tile" data-state="empty"> </div>' * rnd.word_length)
    st.markdown("<br>".join(rows), unsafe_allow_html=True)


def display_keyboard(rnd: Round):
    summary = letter_summary(rnd.history)
    for row in KEYBOARD_ROWS:
        keys = "".join(f'<span class="key" data-state="{summary[letter].value if letter in summary else "empty"}">'
                       f'{letter}</span>' for letter in row)
        st.markdown(keys, unsafe_allow_html=True)


def display_status(rnd: Round):
    status = st.session_state.status
    if not status:
        return
    if rnd is None:
        st.info(status)
    elif rnd.state is RoundState.WON:
        st.success(status)
    elif rnd.is_over:
        st.error(status)
    else:
        st.warning(status)


# --- App Initialization & State ---
st.set_page_config(page_title="Wordle Marathon", layout="wide")
st.title("Wordle Marathon")
st.caption("Green: right letter, right place. Yellow: in the word elsewhere. Gray: not in the word.")

try:
    get_config()
except ValueError as e:
    st.error(f"Invalid configuration: {e}")
    st.stop()

mode = st.sidebar.radio("Mode", MODES, key="mode")

if 'round' not in st.session_state:
    st.session_state.guess = ""
    new_game(mode)

if st.sidebar.button("New Game", key="new_game"):
    new_game(mode)
    st.rerun()

if st.session_state.error:
    st.error(st.session_state.error)
    st.stop()

rnd = st.session_state.round
marathon = st.session_state.marathon

# --- Main Game Area ---
grid_col, control_col = st.columns([2, 1])

with control_col:
    st.subheader("Controls")
    if marathon is not None:
        st.write(f"Round **{marathon.state.round_number}** · "
                 f"**{marathon.state.word_length}** letters · "
                 f"**{marathon.state.attempt_limit}** attempts · "
                 f"Rounds won: **{marathon.state.rounds_won}**")

    if rnd is not None and not rnd.is_over:
        st.write(f"Guesses left: **{rnd.remaining}**")
        st.text_input(f"Enter a {rnd.word_length}-letter word:", key="guess", on_change=submit_guess)
        st.button("Submit Guess", key="submit", on_click=submit_guess)
        st.button("Give Up", key="give_up", on_click=give_up)
    elif marathon is not None and not marathon.is_over:
        st.button("Next Round", key="next_round", on_click=next_round)
    else:
        st.write("Start a 'New Game' from the sidebar.")

    display_status(rnd)

if rnd is not None:
    with grid_col:
        st.subheader("Guess Grid")
        display_guess_grid(rnd)
        display_keyboard(rnd)
