"""Template files rendered into generated projects."""
