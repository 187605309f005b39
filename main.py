# main.py

"""Streamlit web UI for the profanity censor.

Provides a simple interface to submit text and receive a censored version
with profane words masked.
"""

import streamlit as st
import logging
from censor.logging_config import configure_logging
from censor.service.config import settings
from censor.service.pipeline import build_engine, censor_text, parse_terms

configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


def main():
    """Run the Streamlit application UI.

    This function configures the Streamlit page, accepts input text and
    optional word list changes from the user, invokes the censor pipeline,
    and displays the censored output along with basic status information.
    """
    st.set_page_config(layout="wide", page_title="Profanity Censor", page_icon="🤐")

    st.title("Profanity Censor")
    st.markdown(
        "Detect blacklisted words and mask them while keeping punctuation and markup intact."
    )
    st.markdown("---")

    with st.sidebar:
        st.header("Word List")
        extra_raw = st.text_area(
            "Extra blocked words",
            height=120,
            placeholder="One per line or comma separated",
        )
        allowed_raw = st.text_area(
            "Allowed words",
            height=120,
            placeholder="Words that should never be masked",
        )

        st.header("Status")
        st.success("System Ready")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Input Text")
        text_input = st.text_area(
            "Source Text",
            height=400,
            placeholder="Paste text here...",
        )

    with col2:
        st.subheader("Censored Output")

        if st.button("Censor", type="primary"):
            if not text_input or not text_input.strip():
                st.warning("Please enter text to process.")
                logger.warning("Censoring attempted with empty input")

            else:
                try:
                    engine = build_engine(
                        extra_words=parse_terms(extra_raw),
                        allowed_words=parse_terms(allowed_raw),
                    )
                    result = censor_text(text_input, engine=engine)

                    if "error" in result.metadata:
                        st.error(f"Censoring failed: {result.metadata['error']}")
                        logger.error(
                            "Censoring returned error status",
                            extra={"status": "failed", "text_length": len(text_input)},
                        )
                    else:
                        st.text_area(
                            "Censored Text", value=result.censored_text, height=400
                        )

                        st.success(
                            f"Done. Masked {len(result.flagged_tokens)} words."
                        )

                except Exception:
                    st.error("An unexpected error occurred while censoring.")
                    logger.error(
                        "Unexpected error in main application loop",
                        exc_info=True,
                        extra={"text_length": len(text_input) if text_input else 0},
                    )


if __name__ == "__main__":
    main()
