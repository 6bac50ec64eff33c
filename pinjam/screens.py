"""Screens for searching, sorting and simulating customer loans."""

from __future__ import annotations

from collections.abc import Sequence

from pinjam.console import Console
from pinjam.interest import MONTHLY_RATE, fixed_interest, variable_schedule
from pinjam.model import Customer
from pinjam.search import CustomerNotFound, find_customer
from pinjam.sorting import insertion_sort, selection_sort

_ORDER_MENU = (
    "╔═══════════════════════════════════════╗",
    "║ 1. 🔼 Ascending                       ║",
    "║ 2. 🔽 Descending                      ║",
    "╚═══════════════════════════════════════╝",
)


def _ask_choice(console: Console, prompt: str) -> int:
    try:
        return console.ask_int(prompt)
    except ValueError:
        return 0


def search_customer(console: Console, customers: Sequence[Customer]) -> Customer | None:
    """Ask for a name once and print that customer's loan, if there is one."""
    console.say("╔═══════════════════════════════════════")
    name = console.ask("║ 🔍 Masukkan nama yang ingin dicari : ")
    console.say("╚═══════════════════════════════════════")
    try:
        customer = customers[find_customer(customers, name)]
    except CustomerNotFound:
        console.say("❌ Data tidak ditemukan")
        return None
    console.say("\n📄 Data Peminjam Ditemukan:")
    console.say("╔══════════════════════════════════════╗")
    console.say(f"║ 👤 Nama             : {customer.name}")
    console.say(f"║ 💸 Jumlah Pinjaman  : Rp.{customer.loan_amount:.2f}")
    console.say(f"║ 🕒 Tenor            : {customer.tenor} bulan")
    console.say("╚══════════════════════════════════════╝")
    return customer


def _print_sorted(console: Console, customers: Sequence[Customer], label: str, method: str) -> None:
    console.say(f"\n📋 Hasil Pengurutan ({label}):")
    console.say("╔═══════════════════════════════════════╗")
    for customer in customers:
        console.say(f"║ 👤 Nama            : {customer.name}")
        console.say(f"║ 💸 Jumlah Pinjaman : Rp.{customer.loan_amount:.2f}")
        console.say(f"║ 🕒 Tenor           : {customer.tenor} Bulan")
        console.say("╠───────────────────────────────────────╣")
    console.say("╚═══════════════════════════════════════╝")
    console.say(f"\n✅ Data berhasil diurutkan secara {label} dengan {method}.")


def sort_customers(console: Console, customers: list[Customer]) -> None:
    """Let the user pick a sort method and order, then sort in place and print."""
    console.say("\n╔═══════════════════════════════════════╗")
    console.say("║      📊 Pilih Metode Pengurutan       ║")
    console.say("╠═══════════════════════════════════════╣")
    console.say("║ 1. 🔢 Selection Sort                  ║")
    console.say("║ 2. ✏️ Insertion Sort                   ║")
    console.say("╚═══════════════════════════════════════╝")

    while True:
        method = _ask_choice(console, "👉 Pilihan: ")
        if method in (1, 2):
            break
        console.say("⚠️  Input tidak valid, silakan pilih ulang.")

    if not customers:
        console.say("\n🚫 Tidak ada data nasabah.")
        return

    if method == 1:
        name, sorter = "Selection Sort", selection_sort
    else:
        name, sorter = "Insertion Sort", insertion_sort

    console.say(f"\n📥 Metode: {name}")
    for line in _ORDER_MENU:
        console.say(line)
    order = _ask_choice(console, "👉 Pilihan: ")

    if order == 1:
        sorter(customers, descending=False)
        _print_sorted(console, customers, "Ascending", name)
    elif order == 2:
        sorter(customers, descending=True)
        _print_sorted(console, customers, "Descending", name)
    elif method == 1:
        console.say("⚠️  Pilihan tidak valid.")


def simulate_loan(console: Console, customers: Sequence[Customer]) -> None:
    """Pick a customer and an interest scheme, then print the simulation."""
    while True:
        console.say("╔═══════════════════════════════════════")
        name = console.ask("║ 👤 Nama Nasabah Yang Akan Disimulasi : ")
        console.say("╚═══════════════════════════════════════")
        try:
            customer = customers[find_customer(customers, name)]
            break
        except CustomerNotFound:
            console.say("❌ Data tidak ditemukan")
            console.say("⚠️  Nama tidak ditemukan. Coba lagi.")

    console.say("\n╔══════════════════════════════════════╗")
    console.say("║        📊 Pilih Jenis Bunga          ║")
    while True:
        console.say("╠══════════════════════════════════════╣")
        console.say("║ 1. 💰 Bunga Tetap                    ║")
        console.say("║ 2. 📉 Bunga Variabel                 ║")
        console.say("╚══════════════════════════════════════╝")
        choice = _ask_choice(console, "👉 Pilihan: ")
        if choice in (1, 2):
            break
        console.say("⚠️  Input tidak valid, silakan pilih ulang.")

    if choice == 1:
        print_fixed(console, customer)
    else:
        print_variable(console, customer)


def print_fixed(console: Console, customer: Customer) -> None:
    """Print the fixed-interest simulation for ``customer``."""
    figures = fixed_interest(customer)
    console.say("\n📈 Simulasi Cicilan dengan Bunga Tetap")
    console.say("╔══════════════════════════════════════")
    console.say(
        f"║ Bunga/Bulan   = {figures.principal:.2f} × 1% = {figures.monthly_interest:.2f}"
    )
    console.say(
        f"║ Bunga Total   = {figures.monthly_interest:.2f} × {figures.tenor} Bulan"
        f" = {figures.total_interest:.2f}"
    )
    console.say(
        f"║ Total Bayar   = {figures.principal:.2f} + {figures.total_interest:.2f}"
        f" = {figures.total_payment:.2f}"
    )
    console.say(
        f"║ Cicilan/Bulan = {figures.total_payment:.2f} / {figures.tenor}"
        f" = {figures.installment:.2f}"
    )
    console.say("╚══════════════════════════════════════")


def print_variable(console: Console, customer: Customer) -> None:
    """Print the month-by-month declining-balance simulation for ``customer``."""
    schedule = variable_schedule(customer)
    console.say("\n📊 Simulasi Cicilan dengan Bunga Variabel")
    console.say("╔══════════════════════════════════════╗")
    for row in schedule:
        console.say(f"║ 📆 Bulan ke-{row.month}")
        console.say(f"║    Sisa Pokok     : {row.remaining_principal:.2f}")
        console.say(
            f"║    Bunga          : {row.interest:.2f}"
            f" ({MONTHLY_RATE * 100:.2f}% dari {row.remaining_principal:.2f})"
        )
        console.say(f"║    Angsuran Pokok : {row.principal_portion:.2f}")
        console.say(f"║    Cicilan Bulan  : {row.installment:.2f}")
        console.say("╠──────────────────────────────────────╣")
    console.say("╚══════════════════════════════════════╝")