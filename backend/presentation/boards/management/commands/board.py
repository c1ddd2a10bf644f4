"""
Board Shell Command.

Drive the order and supply boards from the terminal:

    python manage.py board --demo
    python manage.py board -c "mock-order" -c "accept 4" -c "show order"

Boards live in memory for the duration of the command.
"""

import inspect
import json
import logging
import shlex
import sys

from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils import timezone

from application.services import BoardService, OrderTracker, SupplyTracker, seed_demo_data
from domain.orders.aggregates import Order
from domain.shared.exceptions import DomainException
from presentation.boards.serializers import board_payload

logger = logging.getLogger(__name__)

BOARD_TITLES = {
    'order': '當前訂單',
    'supply': '商品供應情況',
}

EMPTY_GROUP_TEXT = {
    'order': '當前沒有{title}的項目',
    'supply': '當前沒有{title}的商品',
}

HELP_TEXT = (
    "Commands:\n"
    "  show [order|supply]                 - 顯示看板\n"
    "  new-order <label>                   - 新增訂單\n"
    "  mock-order                          - 生成新訂單\n"
    "  new-product <name> <price> [status] - 新增商品\n"
    "  set <order|supply> <id> <status>    - 變更狀態\n"
    "  accept <id>                         - 接受訂單\n"
    "  complete <id>                       - 完成準備\n"
    "  actions <order|supply> <id>         - 可用的狀態變更\n"
    "  help                                - 說明\n"
    "  exit | quit                         - 離開\n"
)


class Command(BaseCommand):
    help = 'Interactive shell for the order and supply boards'

    stealth_options = ('stdin',)

    def add_arguments(self, parser):
        parser.add_argument(
            '-c', '--command',
            action='append',
            dest='commands',
            default=[],
            help='Run this board command instead of reading from stdin (repeatable)'
        )
        parser.add_argument(
            '--demo',
            action='store_true',
            help='Start with the demo orders and products'
        )
        parser.add_argument(
            '--json',
            action='store_true',
            dest='as_json',
            help='Print board views as JSON'
        )

    def handle(self, *args, **options):
        self.as_json = options['as_json']
        self.service = self._build_service()
        if options['demo']:
            seed_demo_data(self.service)
            logger.debug("Demo data loaded")

        if options['commands']:
            for line in options['commands']:
                if not self.dispatch(line):
                    break
            return

        stdin = options.get('stdin') or sys.stdin
        self.stdout.write("Type 'help' to see commands. Type 'exit' to quit.")
        for line in stdin:
            if not self.dispatch(line):
                break

    def _build_service(self) -> BoardService:
        return BoardService(
            orders=OrderTracker(label_prefix=settings.BOARDS_ORDER_LABEL_PREFIX),
            supply=SupplyTracker(currency=settings.BOARDS_PRICE_CURRENCY),
        )

    # -------------------- dispatch --------------------

    def dispatch(self, line: str) -> bool:
        """Run one board command; returns False when the shell should stop."""
        try:
            words = shlex.split(line or '')
        except ValueError as exc:
            self.stderr.write(self.style.ERROR(f"ERR: {exc}"))
            return True
        if not words:
            return True

        name, args = words[0].lower(), words[1:]
        if name in ('exit', 'quit'):
            return False

        handler = self.COMMANDS.get(name)
        if handler is None:
            self.stderr.write(self.style.ERROR(f"ERR: unknown command: {name}"))
            self.stdout.write(HELP_TEXT)
            return True

        try:
            inspect.signature(handler).bind(self, *args)
        except TypeError:
            self.stderr.write(self.style.ERROR(f"ERR: wrong arguments for '{name}'"))
            self.stdout.write(HELP_TEXT)
            return True

        try:
            handler(self, *args)
        except DomainException as exc:
            self.stderr.write(self.style.ERROR(f"ERR: {exc.message}"))
        return True

    def cmd_help(self):
        self.stdout.write(HELP_TEXT)

    def cmd_show(self, kind=None):
        if kind is None:
            self.show('order')
            self.show('supply')
        else:
            self.show(kind)

    def cmd_new_order(self, label):
        order = self.service.orders.create_order(label)
        self.stdout.write(self.style.SUCCESS(f"Order {order.id} created: {order.label}"))
        self.show('order')

    def cmd_mock_order(self):
        order = self.service.orders.generate_mock_order()
        self.stdout.write(self.style.SUCCESS(f"Order {order.id} created: {order.label}"))
        self.show('order')

    def cmd_new_product(self, name, price, status=None):
        product = self.service.supply.add_product(name, price, status)
        self.stdout.write(self.style.SUCCESS(
            f"Product {product.id} created: {product.name} ({product.status.label})"
        ))
        self.show('supply')

    def cmd_set(self, kind, entity_id, status):
        entity = self.service.set_status(kind, entity_id, status)
        self.stdout.write(self.style.SUCCESS(f"{entity.entity_type} {entity.id} -> {entity.status.label}"))
        self.show(kind)

    def cmd_accept(self, entity_id):
        self.cmd_set('order', entity_id, 'preparing')

    def cmd_complete(self, entity_id):
        self.cmd_set('order', entity_id, 'ready')

    def cmd_actions(self, kind, entity_id):
        targets = self.service.tracker(kind).available_transitions(entity_id)
        if not targets:
            self.stdout.write("<none>")
            return
        for status in targets:
            self.stdout.write(f"{status.value} ({status.label})")

    COMMANDS = {
        'help': cmd_help,
        'h': cmd_help,
        '?': cmd_help,
        'show': cmd_show,
        'new-order': cmd_new_order,
        'mock-order': cmd_mock_order,
        'new-product': cmd_new_product,
        'set': cmd_set,
        'accept': cmd_accept,
        'complete': cmd_complete,
        'actions': cmd_actions,
    }

    # -------------------- rendering --------------------

    def show(self, kind: str):
        tracker = self.service.tracker(kind)
        board = 'order' if tracker is self.service.orders else 'supply'
        groups = tracker.current_view()

        if self.as_json:
            payload = board_payload(board, groups)
            self.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2))
            return

        self.stdout.write(self.style.MIGRATE_HEADING(BOARD_TITLES[board]))
        for group in groups:
            self.stdout.write(f"== {group.title} ({group.count}) ==")
            if group.is_empty:
                self.stdout.write("  " + EMPTY_GROUP_TEXT[board].format(title=group.title))
                continue
            for member in group.members:
                self.stdout.write("  " + self._format_member(member))

    def _format_member(self, member) -> str:
        stamp = timezone.localtime(member.timestamp).strftime('%Y/%m/%d %H:%M:%S')
        if isinstance(member, Order):
            text = f"[{member.id}] {member.label}  {stamp}"
        else:
            text = f"[{member.id}] {member.name}  ${member.price.amount:.2f}  {stamp}"
        targets = member.available_transitions
        if targets:
            text += "  -> " + " / ".join(status.label for status in targets)
        return text
