import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from cards.blackjack import BlackjackCard
from economy.bank import CoinBank
from economy.exceptions import BankError, PlayerFinalizedError
from economy.player import Player
from config.settings import get_settings

console = Console(highlight=False)

# --- Header ---
def print_header():
    title = "coinbank\n... deinitializers & nested types ..."
    console.print(Panel.fit(Text(title, style="bold cyan"), border_style="blue"))

# --- Helper Functions ---

def print_error(message, details=None):
    console.print(f"[bold red]❌ Error:[/bold red] {message}")
    if details:
        console.print(Panel(str(details), title="Details", border_style="red"))

def print_stats(bank: CoinBank):
    table = Table(title="Bank Metrics", show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold white", justify="right")
    for name, value in bank.metrics.snapshot().items():
        table.add_row(name, str(value))
    console.print(table)

def open_bank(args) -> CoinBank:
    """
    A bank private to one walkthrough. Flags left unset fall back to settings.
    """
    settings = get_settings()
    total_coins = settings.BANK_INITIAL_COINS if args.bank_coins is None else args.bank_coins
    strict = settings.BANK_STRICT if args.strict is None else args.strict
    return CoinBank(total_coins, strict=strict)

def handle_deinit(bank: CoinBank, args):
    """
    A player joins, wins some coins and leaves. Leaving drops the last
    reference, which hands the purse back to the bank.
    """
    player_one: Optional[Player] = Player(args.coins, name="PlayerOne", bank=bank)
    console.print(f"A new player has joined the game with {player_one.coins_in_purse} coins")
    console.print(f"There are now {bank.available} coins left in the bank")

    player_one.win(args.win)
    console.print(f"Player won {args.win} coins & now has {player_one.coins_in_purse} coins")
    console.print(f"The bank now only has {bank.available} coins left")

    player_one = None
    console.print("PlayerOne has left the game")
    console.print(f"The bank now has {bank.available} coins")

    if args.stats:
        print_stats(bank)

def handle_nested(bank: Optional[CoinBank], args):
    rank = BlackjackCard.Rank[args.rank.upper()]
    suit = BlackjackCard.Suit[args.suit.upper()]
    card = BlackjackCard(rank=rank, suit=suit)
    label = f"the{rank.name.title()}Of{suit.name.title()}"
    console.print(f"{label}: {card.description}")

    hearts_symbol = BlackjackCard.Suit.HEARTS.value
    console.print(f"heartsSymbol is {hearts_symbol}")

def handle_deck(bank: Optional[CoinBank], args):
    table = Table(title="Blackjack Deck", show_header=True, header_style="bold magenta")
    table.add_column("Card", style="dim")
    table.add_column("Suit")
    table.add_column("Value", style="bold white")
    for card in BlackjackCard.deck():
        values = card.rank.values
        value = str(values.first) if values.second is None else f"{values.first} or {values.second}"
        table.add_row(card.rank.name.title(), card.suit.value, value)
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="coinbank", description="Deinitializer and nested type examples")
    bank_group = parser.add_argument_group("Bank")
    bank_group.add_argument("--bank-coins", type=int, default=None, help="Initial bank supply (default: BANK_INITIAL_COINS)")
    bank_group.add_argument("--strict", action="store_true", default=None, help="Raise instead of clamping or overfilling")

    subparsers = parser.add_subparsers(dest="command", required=True)

    deinit_parser = subparsers.add_parser("deinit", help="Bank and player walkthrough")
    deinit_parser.add_argument("--coins", type=int, default=100, help="Coins requested on joining")
    deinit_parser.add_argument("--win", type=int, default=2_000, help="Coins won before leaving")
    deinit_parser.add_argument("--stats", action="store_true", help="Print bank metrics afterwards")
    deinit_parser.set_defaults(func=handle_deinit, needs_bank=True)

    rank_names = [rank.name.lower() for rank in BlackjackCard.Rank]
    suit_names = [suit.name.lower() for suit in BlackjackCard.Suit]
    nested_parser = subparsers.add_parser("nested", help="Describe a blackjack card")
    nested_parser.add_argument("--rank", default="ace", choices=rank_names)
    nested_parser.add_argument("--suit", default="spades", choices=suit_names)
    nested_parser.set_defaults(func=handle_nested)

    deck_parser = subparsers.add_parser("deck", help="List every card with its values")
    deck_parser.set_defaults(func=handle_deck)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    print_header()
    args = build_parser().parse_args(argv)

    try:
        bank = open_bank(args) if getattr(args, "needs_bank", False) else None
        args.func(bank, args)
    except (BankError, PlayerFinalizedError, ValueError) as e:
        print_error(f"'{args.command}' failed", str(e))
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
