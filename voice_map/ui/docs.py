"""Documentation tab content."""

import streamlit as st

import config


def render_about_tab() -> None:
    """Render the About explanation tab."""
    st.markdown(f"""
## How Voice-Map Works

### Active and Passive Voice

Every sentence pair says the same thing twice:

- **Active:** "The cat chased the mouse."
- **Passive:** "The mouse was chased by the cat."

Both phrasings were run through a sentence embedding model and projected
down to two dimensions. If the model captures meaning rather than word
order, the two points of a pair land close together.

### Reading the Chart

- Green points are active sentences, blue points are passive ones
- Point *i* in one series is the counterpart of point *i* in the other
- Clicking a point draws a dashed line to its counterpart
- Only the first {config.ROW_LIMIT} pairs of the dataset are plotted

### Your Own Sentences

Sentences entered in the sidebar are sent to the embedding service and
plotted in the highlight color. The link to the page keeps them in the
`{config.QUERY_PARAM_ACTIVE}` and `{config.QUERY_PARAM_PASSIVE}` query
parameters, so it can be shared.
""")
