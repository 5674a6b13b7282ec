from __future__ import annotations

from typing import Mapping, Protocol

from .model import Contract, ContractConfig


class ContractRepository(Protocol):
    def get_for_employee(self, employee_id: int) -> ContractConfig:
        """Return the employee's contract, NoContract when none is stored."""

        raise NotImplementedError

    def list_contracts(self) -> Mapping[int, Contract]:
        """All employees that have a usable contract, keyed by employee id."""

        raise NotImplementedError

    def save(self, employee_id: int, contract: ContractConfig) -> None:
        raise NotImplementedError
