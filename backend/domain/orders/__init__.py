"""
Orders Domain - the order board.

Orders move through a forward-only preparation pipeline:
- New (新訂單): placed, waiting to be accepted
- Preparing (準備中): accepted by the kitchen
- Ready (準備完成): prepared, terminal
"""
