import click

from . import __version__
from .board import Board, signals
from .code import Code, ParseError
from .utils import dotdict

import logging
logger = logging.getLogger()

from rich.console import Console
print = Console(highlight=False).print


def prompt_guesses(prompt="what's your guess: "):
    """
    yield lines typed at the terminal, forever
    """
    while True:
        yield input(prompt)


class BoardUI:

    WIN_MESSAGE = "congratulations, you win!"

    def __init__(self, args, guesses=None):
        """
        args.hidden_code is the already parsed Code to play against
        guesses is any iterable of text lines, defaults to the terminal
        """
        args = dotdict(args)

        self.args    = args
        self.board   = Board(args.hidden_code)
        self.guesses = iter(guesses) if guesses is not None else prompt_guesses()

        signals.round_recorded.connect(self.cb_round, sender=self.board)
        signals.game_won.connect(self.cb_won, sender=self.board)

    def get_guess(self):
        """
        pull the next line and parse it, a bad guess ends the game
        """
        try:
            line = next(self.guesses)
        except (StopIteration, EOFError):
            raise click.ClickException(f"input ended after {len(self.board.rounds)} rounds without breaking the code")

        try:
            return Code.parse(line)
        except ParseError as e:
            raise click.ClickException(f"invalid guess: {e}")

    def show_rounds(self):
        for round in self.board.rounds:
            print(str(round))

    def cb_round(self, sender, round):
        self.show_rounds()

    def cb_won(self, sender, round):
        print(f"[bold green]{self.WIN_MESSAGE}[/bold green]")

    def play(self):
        logger.debug(f"hidden code is set, {len(self.board.hidden_code.set)} distinct colors")

        while self.board.in_progress:
            guess = self.get_guess()
            self.board.submit(guess)

        return self.board


def to_code(ctx, param, value):
    try:
        return Code.parse(value)
    except ParseError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


@click.command()
@click.option('--hidden-code', required=True, metavar='HIDDEN_CODE', callback=to_code,
              help="the hidden code for this game, eg. rgbp or (r,g,b,p)")
@click.option('-v', '--verbose', is_flag=True, help="log every parsed code and round to stderr")
@click.version_option(__version__, prog_name='mastermind')
@click.pass_context
def cli(ctx, *_, **args):
    """
    play a game of mastermind against HIDDEN_CODE

    the code is 4 colors from r(ed), g(reen), b(lue) and p(urple), repeats
    allowed. type a guess like 'rgbp' each round, every guess is scored with
    b=right color in the right spot, w=color is somewhere else in the code.
    """
    logging.basicConfig(format="%(message)s")
    logger.setLevel(logging.DEBUG if args['verbose'] else logging.INFO)

    try:
        ui = BoardUI(args)
        ui.play()
    except KeyboardInterrupt:
        pass
