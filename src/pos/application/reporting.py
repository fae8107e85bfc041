"""Abstract sink for everything a checkout announces.

The application decides *what* is reported and in which order; concrete
reporters (console, in-memory) decide how it is rendered.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.application.dto import BalanceDTO, ReceiptDTO, ShipmentNoticeDTO


class CheckoutReporter(ABC):

    @abstractmethod
    def shipment_notice(self, notice: ShipmentNoticeDTO) -> None:
        """Announce the shippable lines and the package weight."""

    @abstractmethod
    def receipt(self, receipt: ReceiptDTO) -> None:
        """Announce the priced lines and totals."""

    @abstractmethod
    def balance(self, balance: BalanceDTO) -> None:
        """Announce the customer's balance after payment."""
