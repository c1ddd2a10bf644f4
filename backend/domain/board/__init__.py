"""
Board Domain - the machinery shared by every status board.

- Status machine: status set, display order, transition policy
- Tracked entity: aggregate base with a machine-governed status
- Entity store: in-memory collection of one kind
- Projector: entities grouped by status, newest first
"""
