"""Assignment map types — department codes handed to assignees."""

# department code -> assignee id; unassigned codes are simply absent
AssignmentMap = dict[str, str]

# department code -> assignee id, or None to unassign
AssignmentDiff = dict[str, str | None]
