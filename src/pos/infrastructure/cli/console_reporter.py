"""CheckoutReporter that prints to the terminal."""

from __future__ import annotations

import click

from pos.application.dto import BalanceDTO, ReceiptDTO, ShipmentNoticeDTO
from pos.application.reporting import CheckoutReporter


class ConsoleReporter(CheckoutReporter):

    def shipment_notice(self, notice: ShipmentNoticeDTO) -> None:
        click.echo("** Shipment notice **")
        for line in notice.lines:
            click.echo(line)
        click.echo(f"Total package weight {notice.total_weight}")
        click.echo()

    def receipt(self, receipt: ReceiptDTO) -> None:
        click.echo("** Checkout receipt **")
        for line in receipt.lines:
            click.echo(f"{line.quantity}x {line.product_name}    {line.line_total}")
        click.echo("-" * 22)
        click.echo(f"{'Subtotal':<17}{receipt.subtotal}")
        click.echo(f"{'Shipping':<17}{receipt.shipping}")
        click.echo(f"{'Amount':<17}{receipt.total}")
        click.echo()

    def balance(self, balance: BalanceDTO) -> None:
        click.echo(f"Customer Balance ({balance.customer_name}): {balance.balance}")
