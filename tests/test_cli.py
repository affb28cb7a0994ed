# --------------------------------------------------------------
# File: test_cli.py
# Description: Pruebas del bucle interactivo de consola.
# --------------------------------------------------------------

import cli


def _session(answers, *, wide=False):
    """Ejecuta el bucle con respuestas predefinidas y devuelve la salida.

    Args:
        answers (list): Respuestas que se entregan a cada prompt, en orden.
        wide (bool): Activa las claves delimitadas.

    Returns:
        str: Toda la salida producida por el bucle.
    """
    pending = list(answers)
    output = []

    def fake_input(prompt):
        output.append(prompt)
        if not pending:
            raise EOFError
        return pending.pop(0)

    cli.run(fake_input, output.append, wide=wide)
    return "\n".join(output)


def test_single_round_encrypts_and_decrypts():
    """Comprueba una ronda completa con el vector HELLOWORLD.

    Returns:
        None: Las aserciones revisan la salida impresa.
    """
    out = _session(["HELLOWORLD", "312", "n"])
    assert "Number of columns: 3" in out
    assert "Number of rows: 4" in out
    assert "Encrypted Text: LWLzHLODEORz" in out
    assert "Decrypted Text: HELLOWORLD" in out
    assert "| 4 | D | z | z |" in out


def test_plaintext_with_digits_is_reprompted():
    """El texto con dígitos se vuelve a pedir hasta que sea válido."""
    out = _session(["room 101", "HI", "21", "n"])
    assert "Error: Plaintext must not contain numbers (0-9)." in out
    assert "Decrypted Text: HI" in out


def test_invalid_keys_restart_round():
    """Las claves no válidas muestran el error y reinician la ronda."""
    out = _session(["HI", "abc", "HI", "-3", "HI", "112", "HI", "105", "HI", "21", "n"])
    assert "Error: Key must be a positive integer composed of digits 1..9." in out
    assert "Error: Key must be greater than 0." in out
    assert "Error: Key must be a permutation of 1..3." in out
    assert "Error: Key must contain digits 1..9 only, no zeros or letters." in out
    assert out.count("=== Tabular TC ===") == 5
    assert "Decrypted Text: HI" in out


def test_repeat_until_no():
    """Responder que sí repite el proceso con un nuevo texto."""
    out = _session(["AB", "12", "yes", "CD", "21", "n"])
    assert "Decrypted Text: AB" in out
    assert "Decrypted Text: CD" in out
    assert "Encrypted Text: DC" in out


def test_wide_keys_in_console():
    """En modo amplio la clave admite enteros separados por comas."""
    out = _session(["HELLOWORLD", "10,9,8,7,6,5,4,3,2,1", "n"], wide=True)
    assert "Number of columns: 10" in out
    assert "Encrypted Text: DLROWOLLEH" in out


def test_eof_ends_loop():
    """Un fin de entrada termina el bucle sin error."""
    out = _session([])
    assert "Plain Text: " in out


def test_wide_key_errors_use_delimited_wording():
    """En modo amplio los errores describen el formato de enteros delimitados."""
    out = _session(["HI", "1,a", "HI", "", "HI", "1,1", "HI", "2,1", "n"], wide=True)
    assert "Error: Key must be positive integers separated by commas or spaces, no zeros or letters." in out
    assert "Error: Key must not be empty." in out
    assert "Error: Key must be a permutation of 1..2. Example for 4: 3,1,4,2." in out
    assert "digits 1..9" not in out
    assert "Decrypted Text: HI" in out
