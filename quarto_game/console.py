"""Console front end for Quarto: menus, input validation and the game loop."""

from __future__ import annotations

import subprocess
import sys
import time
from typing import Callable, Sequence, TextIO

from .board import Board
from .pieces import Pawn, make_pawn_set, shuffle_pawns, take_pawn

FIRST_PLAYER = "Joueur 1"
SECOND_PLAYER = "Joueur 2"

_EMPTY_ERROR = "[ERR] Votre réponse ne peut pas être vide.\nVeuillez réessayer : \n"
_LENGTH_ERROR = "[ERR] ENTREE INVALIDE ! Veuillez entrer une seule valeur : \n"
_READ_ERROR = "[ERR] Lecture impossible.\n"
_QUIT_MESSAGE = "Vous avez quitté le jeu !"

_PAWN_LEGEND = (
    "\nChaque lettre représente une caractéristique\n\n"
    "Taille : Grand(G) ou Petit(P)\n"
    "Forme : Rond(R) ou Carrée(C)\n"
    "Couleur : Jaune(J) ou Brun(B)\n"
    "Remplissage : Entier(E) ou Troué(T)\n\n\n"
)

InputFunc = Callable[[], str]


class QuitGame(Exception):
    """Raised when the player asks to leave the game or input runs out."""

    def __init__(self, message: str = _QUIT_MESSAGE) -> None:
        super().__init__(message)


def in_bounds(char: str, low: str, high: str) -> bool:
    """Return True when ``char``, lower-cased, lies between ``low`` and ``high``."""
    return low <= char.lower() <= high


def parse_choice(text: str, low: str, high: str) -> int:
    """Validate one typed character and return its value.

    Digits give their numeric value, letters their position from 'a'.
    Raises ValueError with a message for the player on bad input and
    QuitGame when '0' is typed and allowed.
    """
    text = text.removesuffix("\n").removesuffix("\r")
    if not text:
        raise ValueError(_EMPTY_ERROR)
    if len(text) > 1:
        raise ValueError(_LENGTH_ERROR)
    if not in_bounds(text, low, high):
        raise ValueError(
            f"[ERR]ENTREE INVALIDE ! Veuillez entrer une valeur entre {low} et {high} \n"
        )
    char = text.lower()
    if char == "0":
        raise QuitGame()
    if "a" <= char <= "z":
        return ord(char) - ord("a")
    return ord(char) - ord("0")


def read_choice(
    low: str,
    high: str,
    input_func: InputFunc | None = None,
    output: TextIO | None = None,
) -> int:
    """Prompt until a valid choice between ``low`` and ``high`` is typed."""
    reader = input_func if input_func is not None else input
    out = output if output is not None else sys.stdout
    while True:
        try:
            line = reader()
        except EOFError:
            out.write(_READ_ERROR)
            raise QuitGame() from None
        try:
            return parse_choice(line, low, high)
        except ValueError as exc:
            out.write(str(exc))


def other_player(name: str) -> str:
    """Return the name of the player whose turn comes after ``name``."""
    return SECOND_PLAYER if name == FIRST_PLAYER else FIRST_PLAYER


def menu_text() -> str:
    """Return the main menu."""
    return (
        "\t\t\t===QUARTO===\n\n\n\n"
        "Veuillez choisir une option parmi les suivantes :\n\n"
        "1- LANCER UNE PARTIE\n"
        "2- RÈGLES DU JEU\n\n\n"
        "0- QUITTER LE JEU\n"
        "\nVeuillez entrer votre choix : \n"
    )


def rules_text() -> str:
    """Return the rules of the game."""
    return (
        "\t\t\t===RÈGLES DU JEU===\n\n\n"
        "Le but est d'aligner quatre pièces partageant au moins une caractéristique commune"
        "\nparmi les suivantes : Hauteur(haute ou basse), Couleur(Claire ou foncée)"
        "\nForme(Ronde ou Carrée), Remplissage(Plain ou creux), le premier qui y arrives gagne la partie"
        "\nSi aucun des deux joeurs ny arrive avant que le nombre de pion libre ne soit épuisé, il ya égalité"
        "\n\n\nAppuyer deux fois sur ENTREE pour retourner au menu"
    )


def render_pawn_list(pawns: Sequence[Pawn], last_index: int) -> str:
    """Return the legend and the pawns up to ``last_index``, lettered from 'A'."""
    lines = "".join(
        f"{chr(ord('A') + position)}- {pawn.code()}\n"
        for position, pawn in enumerate(pawns[: last_index + 1])
    )
    return _PAWN_LEGEND + lines + "\nEntrer 0 pour quitter \n"


def clear_screen() -> None:
    """Clear the terminal."""
    subprocess.run("cls || clear", shell=True, check=False)


def _clear(output: TextIO) -> None:
    isatty = getattr(output, "isatty", None)
    if isatty is not None and isatty():
        clear_screen()


def _read_square(
    board: Board,
    pawn: Pawn,
    input_func: InputFunc | None,
    output: TextIO,
) -> tuple[int, int]:
    high = str(board.size)
    output.write(f"\nLes numéros de ligne vont de 1 à {board.size}.\n")
    output.write(
        "\nVeuillez entrer le numéro de la ligne où vous voulez placer "
        f"le pion {pawn.code()} :\n"
    )
    row = read_choice("1", high, input_func, output) - 1
    output.write(f"\nLes numéros de colonne vont de 1 à {board.size}.\n")
    output.write(
        "\nVeuillez entrer le numéro de la colonne où vous voulez placer "
        f"le pion {pawn.code()}:\n"
    )
    column = read_choice("1", high, input_func, output) - 1
    return row, column


def play_game(
    pawns: list[Pawn],
    board: Board,
    input_func: InputFunc | None = None,
    output: TextIO | None = None,
    pause: Callable[[float], object] = time.sleep,
) -> str | None:
    """Play one game; return the winner's name, or None for a draw.

    ``pawns`` is consumed as pawns are placed on ``board``.
    """
    out = output if output is not None else sys.stdout
    player = SECOND_PLAYER
    won = False

    while not won and pawns:
        out.write(f"{player} Veuillez choisir le pion de votre adversaire\n")
        out.write(render_pawn_list(pawns, len(pawns) - 1))
        out.write("\n\nVeuillez entrer votre choix : \n")
        high = chr(ord("a") + len(pawns) - 1)
        index = read_choice("a", high, input_func, out)
        pawn = pawns[index]

        _clear(out)
        out.write(board.render())
        player = other_player(player)
        out.write(f"{player} \n")

        row, column = _read_square(board, pawn, input_func, out)
        while board.is_occupied(row, column):
            out.write("[ERR] Veuillez selectionner une case vide !")
            row, column = _read_square(board, pawn, input_func, out)

        _clear(out)
        board.place(row, column, pawn)
        take_pawn(pawns, index)
        out.write("\n\nPions placé avec succés !")
        out.flush()
        out.write(board.render())
        pause(3)

        won = board.is_win(row, column)

    if won:
        out.write(board.render())
        out.write(f"\n\nPartie Terminé. Victoire du {player} \n")
        return player

    _clear(out)
    out.write(board.render())
    out.write("Partie Terminé. Égalité")
    return None


def _press_enter_twice() -> None:
    input()
    input()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive game; return the process exit status."""
    out = sys.stdout
    try:
        _clear(out)
        out.write(menu_text())
        choice = read_choice("0", "2", None, out)
        while True:
            if choice == 1:
                board = Board()
                pawns = shuffle_pawns(make_pawn_set())
                play_game(pawns, board, None, out)
                return 0
            _clear(out)
            out.write(rules_text())
            try:
                _press_enter_twice()
            except EOFError:
                raise QuitGame() from None
            _clear(out)
            out.write(menu_text())
            choice = read_choice("0", "2", None, out)
    except QuitGame as exc:
        out.write(f"{exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())