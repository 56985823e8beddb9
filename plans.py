PAGE_TITLE = "Diffium To‑Do"
PAGE_SUBTITLE = "Next.js app scaffold. We’ll build the to‑do next."
SAMPLE_HEADING = "Sample"

SAMPLE_PLAN = (
    "Wire up basic to‑do list",
    "Add input + add/remove items",
    "Persist in localStorage",
)
