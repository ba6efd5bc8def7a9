"""Plain-text delivery report for an aircraft."""

from datetime import datetime

from aerocode.domain.aggregates import Aircraft

NO_RESULT = "NOT SET"  # pragma: no mutate


def render_report(aircraft: Aircraft, generated_at: datetime) -> str:
    """Render the full state of an aircraft plus its delivery metadata.

    The output depends only on the aircraft and ``generated_at``. Lines are
    joined with ``\\n`` and there is no trailing newline.

    Args:
        aircraft: The aircraft to describe.
        generated_at: Timestamp written on the last line (ISO-8601).

    Returns:
        str: The rendered report.
    """
    lines = [
        f"Aircraft Report - {aircraft.code}",
        f"Model: {aircraft.model}",
        f"Type: {aircraft.type.value}",
        f"Capacity: {aircraft.capacity}",
        f"Range: {aircraft.range}",
        "",
        "Parts:",
    ]
    lines.extend(
        f"- {p.id} | {p.name} | {p.type.value} | {p.supplier} | {p.status.value}"
        for p in aircraft.parts
    )
    lines += ["", "Stages:"]
    lines.extend(
        f"- {s.id} | {s.name} | {s.deadline} | {s.status.value} | "
        f"Employees: {','.join(s.assignees)}"
        for s in aircraft.stages
    )
    lines += ["", "Tests:"]
    lines.extend(
        f"- {t.id} | {t.kind.value} | Result: {t.result.value if t.result else NO_RESULT}"
        for t in aircraft.tests
    )
    lines += [
        "",
        f"Client: {aircraft.client}",
        f"Delivery date: {aircraft.delivery_date}",
        f"Generated at: {generated_at.isoformat()}",
    ]
    return "\n".join(lines)
