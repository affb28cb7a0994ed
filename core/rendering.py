# --------------------------------------------------------------
# File: rendering.py
# Description: Representación ASCII de la tabla y de los grupos del ciphertext.
# --------------------------------------------------------------
"""Formateo de texto para inspeccionar el cifrado; no forma parte del motor."""

from typing import List, Sequence


def _table_rule(num_cols: int) -> str:
    return "-" + "----" * (num_cols + 1)


def render_grid(grid: Sequence[Sequence[str]], num_cols: int) -> str:
    """Dibuja la tabla con cabecera de columnas ``0..N`` y etiquetas de fila ``1..R``.

    Args:
        grid (Sequence[Sequence[str]]): Filas de la tabla.
        num_cols (int): Número de columnas (necesario para tablas vacías).

    Returns:
        str: Tabla lista para imprimir, sin salto de línea final.

    """

    rule = _table_rule(num_cols)
    lines: List[str] = [rule, "".join(f"| {i} " for i in range(num_cols + 1)) + "|"]
    for row_index, row in enumerate(grid):
        lines.append(rule)
        cells = "".join(f"| {char} " for char in row)
        lines.append(f"| {row_index + 1} {cells}|")
    lines.append(rule)
    return "\n".join(lines)


def _box_labels(labels: Sequence[str], num_rows: int) -> str:
    # Centra cada etiqueta sobre su caja de ancho num_rows + 6.
    half = " " * (num_rows // 2)
    tail = "   " if num_rows % 2 == 0 else "    "
    return "".join(f"  {half}{label}{half}{tail}" for label in labels).rstrip()


def render_groups(groups: Sequence[str], key: Sequence[int], *, substitute: bool) -> str:
    """Dibuja los grupos del ciphertext en cajas con una etiqueta centrada.

    Args:
        groups (Sequence[str]): Grupos de ``num_rows`` caracteres.
        key (Sequence[int]): Clave usada al cifrar.
        substitute (bool): Si es ``True`` la etiqueta es el dígito de la clave en
            esa posición (columna de destino); si no, la posición ``1..N``.

    Returns:
        str: Cajas con etiquetas arriba o abajo según ``substitute``.

    """

    num_rows = len(groups[0]) if groups else 0
    if substitute:
        labels = [str(value) for value in key]
    else:
        labels = [str(i + 1) for i in range(len(groups))]

    rule = "".join("--" + "-" * num_rows + "--  " for _ in groups).rstrip()
    boxes = "".join(f"| {group} |  " for group in groups).rstrip()
    label_line = _box_labels(labels, num_rows)
    if substitute:
        return "\n".join([rule, boxes, rule, label_line])
    return "\n".join([label_line, rule, boxes, rule])


def render_decrypt_view(groups: Sequence[str], key: Sequence[int]) -> str:
    """Cajas con la posición arriba y la columna de destino debajo."""

    num_rows = len(groups[0]) if groups else 0
    boxed = render_groups(groups, key, substitute=False)
    bottom = _box_labels([str(value) for value in key], num_rows)
    return "\n".join([boxed, bottom])
