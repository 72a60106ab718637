"""
Stockledger signals.

All signals are sent synchronously inside the transaction of the operation
that caused them. A receiver that raises aborts that operation.

movement_recorded
    sender=StockMovement; kwargs: movement, material, change_type,
    balance (stock after the movement), actor_id, note

alert_raised
    sender=Alert; kwargs: alert, material, balance

alert_resolved
    sender=Alert; kwargs: alert, actor_id
"""

from django.dispatch import Signal

movement_recorded = Signal()
alert_raised = Signal()
alert_resolved = Signal()
