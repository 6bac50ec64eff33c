"""Screens that add, change, delete and report on customer records."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from pinjam.console import Console
from pinjam.model import Customer
from pinjam.search import CustomerNotFound, find_customer, name_taken

TENOR_MONTHS = {1: 3, 2: 6, 3: 12}


def _locate(console: Console, customers: Sequence[Customer], prompt: str, *, boxed: bool = True) -> int:
    """Keep asking for a name until a customer with that name is found."""
    while True:
        if boxed:
            console.say("╔═══════════════════════════════════════")
        name = console.ask(prompt)
        if boxed:
            console.say("╚═══════════════════════════════════════")
        try:
            return find_customer(customers, name)
        except CustomerNotFound:
            console.say("❌ Data tidak ditemukan")
            console.say("⚠️  Nama tidak ditemukan. Coba lagi.")


def _ask_name(console: Console, customers: Sequence[Customer]) -> str:
    while True:
        name = console.ask("Masukkan Nama : ")
        if not name:
            console.say("Nama tidak boleh kosong.")
        elif name_taken(customers, name):
            console.say("⚠️  Maaf, nama sudah digunakan. Mohon masukkan nama yang lain.")
        else:
            return name


def _ask_amount(console: Console) -> float:
    while True:
        answer = console.ask("║ Masukkan Nominal Yang Diajukan : ")
        console.say("╚═══════════════════════════════════════")
        try:
            return float(answer)
        except ValueError:
            console.say("⚠️  Input tidak valid. Masukkan angka.")


def _ask_tenor(console: Console) -> int:
    console.say()
    console.say("╔══════════════════════════════════════╗")
    console.say("║            🕒 PILIH TENOR            ║")
    console.say("╠══════════════════════════════════════╣")
    console.say("║ 1. Tenor 3 Bulan                     ║")
    console.say("║ 2. Tenor 6 Bulan                     ║")
    console.say("║ 3. Tenor 1 Tahun                     ║")
    console.say("╚══════════════════════════════════════╝")
    while True:
        try:
            choice = console.ask_int("👉 Pilihan: ")
        except ValueError:
            choice = 0
        if choice in TENOR_MONTHS:
            return TENOR_MONTHS[choice]
        console.say("⚠️  Pilihan tenor tidak valid, silakan pilih ulang.")


def add_customer(console: Console, customers: Sequence[Customer]) -> Customer:
    """Ask for a new customer's name, loan amount and tenor and return the record."""
    name = _ask_name(console, customers)
    amount = _ask_amount(console)
    tenor = _ask_tenor(console)

    console.say("\n🎉 ✅ Berhasil Ditambahkan:")
    console.say("╔══════════════════════════════════════╗")
    console.say(f"║ Nama            : {name}")
    console.say(f"║ Jumlah Pinjaman : Rp.{amount:.0f}")
    console.say(f"║ Tenor           : {tenor} bulan")
    console.say("╚══════════════════════════════════════╝")
    return Customer(name=name, loan_amount=amount, tenor=tenor)


def edit_customer(console: Console, customers: Sequence[Customer]) -> Customer:
    """Replace a chosen customer's details with freshly entered ones."""
    while True:
        console.say("\n╔══════════════════════════════════════╗")
        console.say("║     ✏️ Nasabah Yang Ingin Diubah      ║")
        console.say("╚══════════════════════════════════════╝")
        name = console.ask("👉 Nama: ")
        try:
            index = find_customer(customers, name)
            break
        except CustomerNotFound:
            console.say("❌ Data tidak ditemukan")
            console.say("⚠️ Nama tidak ditemukan. Silakan coba lagi.")

    console.say("\n🔄 Silakan masukkan data baru untuk nasabah ini:")
    fresh = add_customer(console, customers)
    customer = customers[index]
    customer.name = fresh.name
    customer.loan_amount = fresh.loan_amount
    customer.tenor = fresh.tenor
    if customer.paid_installments > 0:
        customer.paid_installments = ask_paid_installments(console, customer)

    console.say("\n✅ Data Nasabah Sukses Diperbarui!")
    return customer


def delete_customer(console: Console, customers: MutableSequence[Customer]) -> Customer | None:
    """Remove a chosen customer after confirmation; return it, or None if cancelled."""
    index = _locate(console, customers, "║ 🗑️ Nama Nasabah Untuk Dihapus : ")
    while True:
        answer = console.ask(
            f'\n❓ Apakah yakin ingin menghapus "{customers[index].name}"? [y/n]: '
        )
        if answer == "y":
            removed = customers.pop(index)
            console.say("\n✅ Data berhasil dihapus.")
            return removed
        if answer == "n":
            console.say("\n❎ Penghapusan dibatalkan.")
            return None
        console.say("⚠️  Input tidak valid! Pilih 'y' atau 'n'.")


def ask_paid_installments(console: Console, customer: Customer) -> int:
    """Ask how many instalments were paid, between 0 and the customer's tenor."""
    while True:
        console.say("╔═══════════════════════════════════════")
        answer = console.ask("║ 💲Masukkan Cicilan Yang sudah Dibayar : ")
        console.say("╚═══════════════════════════════════════")
        try:
            months = int(answer)
        except ValueError:
            console.say("\n ⚠️ Input tidak valid. Masukkan angka. ")
            continue
        if months < 0:
            console.say("\n ⚠️ Mohon Masukkan Inputan yang tidak lebih kecil dari 0 ")
            continue
        if months > customer.tenor:
            console.say("\n ⚠️ Mohon Masukkan Inputan yang tidak lebih besar dari Tenor ")
            continue
        return months


def show_payment_status(console: Console, customer: Customer) -> None:
    """Print a customer's loan and how many instalments remain."""
    console.say("╔══════════════════════════════════════════╗")
    console.say(f"║ 👤 Nama              : {customer.name}")
    console.say(f"║ 💰 Jumlah Pinjaman   : Rp.{customer.loan_amount:.2f}")
    console.say(f"║ 🕒 Tenor             : {customer.tenor} Bulan")
    if customer.paid_installments < customer.tenor:
        console.say(
            "║ 💵 Status Pembayaran : Belum Lunas, Tersisa "
            f"{customer.remaining_installments()} dari {customer.tenor} cicilan tersisa"
        )
    elif customer.is_paid_off():
        console.say("║ 💵 Status Pembayaran : Lunas")
    console.say("╚══════════════════════════════════════════╝")


def record_payment(console: Console, customers: Sequence[Customer]) -> Customer:
    """Set the number of paid instalments for a chosen customer and show the status."""
    index = _locate(
        console, customers, "║ 👤 Nama Nasabah Yang Akan Diinput Status Pembayarannya  : "
    )
    console.say("\n🎉 ✅Data Nasabah Behasil ditemukan")
    customer = customers[index]
    customer.paid_installments = ask_paid_installments(console, customer)
    show_payment_status(console, customer)
    return customer


def show_report(console: Console, customers: Sequence[Customer]) -> None:
    """Print every customer's loan."""
    console.say("\n╔══════════════════════════════════════════╗")
    console.say("║            📄 LAPORAN PINJAMAN           ║")
    console.say("╚══════════════════════════════════════════╝")
    if not customers:
        console.say("⚠️ Tidak ada data nasabah.")
        return
    for customer in customers:
        console.say("╔══════════════════════════════════════════╗")
        console.say(f"║ 👤 Nama             : {customer.name}")
        console.say(f"║ 💰 Jumlah Pinjaman  : Rp.{customer.loan_amount:.2f}")
        console.say(f"║ 🕒 Tenor            : {customer.tenor} Bulan")
        console.say("╚══════════════════════════════════════════╝")