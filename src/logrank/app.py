# app.py — Streamlit page for ranking words in pasted or uploaded log text
# Run:  streamlit run src/logrank/app.py

from __future__ import annotations

from typing import List

import streamlit as st

from logrank.demo import DEMO_K, SAMPLE_LOGS
from logrank.ranker import count_words, top_k_words
from logrank.report import format_ranked, to_rows


def _lines_from_upload(upload) -> List[str]:
    return upload.getvalue().decode("utf-8", errors="replace").splitlines()


st.set_page_config(page_title="Log word ranking", layout="wide")
st.title("Log word ranking")

with st.sidebar:
    k = st.number_input("Top k", value=DEMO_K, min_value=0, step=1)
    upload = st.file_uploader("Log file", type=None, help="Replaces the text area below")
    st.caption("Words are lowercase runs of a-z and 0-9; everything else separates them.")

text = st.text_area("Log lines", value="\n".join(SAMPLE_LOGS), height=200)
lines = _lines_from_upload(upload) if upload is not None else text.splitlines()

counts = count_words(lines)
result = top_k_words(lines, int(k))

m_tokens, m_vocab, m_shown = st.columns(3)
m_tokens.metric("Tokens", sum(counts.values()))
m_vocab.metric("Distinct words", len(counts))
m_shown.metric("Shown", len(result))

if result:
    st.dataframe(to_rows(result), hide_index=True)
else:
    st.info("No words to rank.")

st.code(format_ranked(result), language="python")
