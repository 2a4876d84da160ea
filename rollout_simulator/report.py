def format_tick(summary):
    """Render a TickSummary as human readable status lines"""
    lines = [
        f"Tick {summary.tick}: {summary.promoted} servers moved to production.",
        f"Found {summary.progressed} that still need to finish updating ({summary.finished} finished this tick).",
        f"Concurrency delta is {summary.delta}.",
        f"Selecting {summary.admitted} old servers for update process.",
        f"Total machines {summary.total}.",
        f"New machines {summary.new}.",
    ]
    if summary.completed:
        lines.append("All servers are up to date.")
    else:
        lines.append("Rolling deployment still in progress.")
    return lines
