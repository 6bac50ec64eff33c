"""The interactive loan ledger menu."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from pinjam.console import Console
from pinjam.model import Customer
from pinjam.records import (
    add_customer,
    delete_customer,
    edit_customer,
    record_payment,
    show_report,
)
from pinjam.screens import search_customer, simulate_loan, sort_customers

_MENU = (
    "\n╔══════════════════════════════════════╗",
    "║              📋  MENU                ║",
    "╠══════════════════════════════════════╣",
    "║  1. ➕ Tambah Peminjam               ║",
    "║  2. ✏️ Ubah Data Peminjam             ║",
    "║  3. ❌ Hapus Data Peminjam           ║",
    "║  4. 💰 Simulasi Pinjaman             ║",
    "║  5. 💵 Input Status Pembayaran       ║",
    "║  6. 🔍 Cari Peminjam                 ║",
    "║  7. 📊 Urutkan Data Peminjam         ║",
    "║  8. 📑 Tampilkan Laporan             ║",
    "║  9. 🚪 Keluar                        ║",
    "╚══════════════════════════════════════╝",
)

EXIT_CHOICE = 9


def dummy_customers() -> list[Customer]:
    """Sample customers offered at start-up."""
    return [
        Customer("Andi Setiawan", 15000000, 12, 6),
        Customer("Budi Hartono", 20000000, 12, 12),
        Customer("Citra Ayu", 10000000, 6, 6),
        Customer("Dewi Lestari", 25000000, 12, 3),
        Customer("Eka Pratama", 30000000, 3, 1),
        Customer("Fajar Nugroho", 12000000, 12, 3),
        Customer("Gina Marissa", 18000000, 12, 6),
        Customer("Hadi Santoso", 22000000, 6, 4),
        Customer("Ika Putri", 9000000, 6, 3),
        Customer("Joko Susanto", 27000000, 12, 12),
    ]


def _banner(console: Console, title: str) -> None:
    console.say("╔══════════════════════════════════════╗")
    console.say(title)
    console.say("╚══════════════════════════════════════╝")


def _add(console: Console, customers: list[Customer]) -> None:
    customers.append(add_customer(console, customers))


_ACTIONS: dict[int, tuple[str, Callable[[Console, list[Customer]], object], str]] = {
    1: ("║        ➕ Menu Tambah Nasabah        ║", _add, "✅ Menu Tambah Data Nasabah Selesai"),
    2: ("║      📝  Menu Ubah Data Nasabah      ║", edit_customer, "✅ Menu Ubah Data Nasabah Selesai"),
    3: ("║        ❌ Menu Hapus Nasabah         ║", delete_customer, "✅ Menu Hapus Data Nasabah Selesai"),
    4: ("║      💰 Menu Simulasi Pinjaman       ║", simulate_loan, "✅ Menu Simulasi Pinjaman Selesai"),
    5: ("║      💵 Menu Status Pembayaran       ║", record_payment, "✅ Menu Simulasi Pinjaman Selesai"),
    6: ("║         🔍 Cari Pinjaman             ║", search_customer, "✅ Menu Cari Pinjaman Selesai"),
    7: ("║      📊 Urutkan Data Pinjaman        ║", sort_customers, "✅ Menu Urutkan Data Pinjaman Selesai"),
    8: ("║        📑 Tampilkan Laporan          ║", show_report, "✅ Menu Tampilkan Laporan Selesai"),
}


def _ask_dummy(console: Console) -> list[Customer]:
    while True:
        answer = console.ask("Apakah Anda Ingin Menggunakan Data Dummy? [y/n] : ")
        if answer == "y":
            return dummy_customers()
        if answer == "n":
            return []
        console.say("⚠️  Inputan Tidak Valid!")


def run(console: Console) -> list[Customer]:
    """Run the menu loop until the user leaves; return the final customer list."""
    customers = _ask_dummy(console)
    while True:
        for line in _MENU:
            console.say(line)
        try:
            choice = console.ask_int("👉 Pilihan Anda: ")
        except ValueError:
            choice = -1
        if not 1 <= choice <= EXIT_CHOICE:
            console.say("⚠️  Menu Tidak Valid!")
        if choice in (0, EXIT_CHOICE):
            break
        action = _ACTIONS.get(choice)
        if action is None:
            continue
        title, handler, done = action
        _banner(console, title)
        handler(console, customers)
        console.say(done)
    console.say("🙏 Terimakasih Sudah Menggunakan Program Kami")
    return customers


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive loan ledger."""
    parser = argparse.ArgumentParser(prog="pinjam", description="Interactive loan ledger.")
    parser.parse_args(argv)
    console = Console()
    try:
        run(console)
    except (EOFError, KeyboardInterrupt):
        console.say()
    return 0