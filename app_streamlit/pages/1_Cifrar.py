# --------------------------------------------------------------
# File: 1_Cifrar.py
# Description: Cifra texto con transposición tabular y guarda el resultado.
# --------------------------------------------------------------

import streamlit as st

from api.services import encrypt_message, store_message
from core import config
from core.rendering import render_grid
from core.text_policy import check_plaintext
from core.transposition import build_grid, pad_plaintext

# Presenta el título de la sección dedicada al cifrado.
st.title("🔒 Cifrar")

plaintext = st.text_input("Plain Text", key="enc_plaintext")
wide = st.checkbox(
    "Clave con varias cifras (separada por comas)",
    value=config.WIDE_KEYS,
    help="Permite más de 9 columnas, por ejemplo: 3,10,1,2,4,5,6,7,8,9",
)
key_text = st.text_input("Auto Key", key="enc_key", help="Permutación de 1..N, por ejemplo 312.")

# Avisa de inmediato si el texto contiene dígitos.
ok_pt, reasons = check_plaintext(plaintext)
if not ok_pt:
    st.warning("\n- ".join(["Corrige el texto:"] + reasons))

if st.button("Cifrar", disabled=not ok_pt or not key_text, key="btn_encrypt"):
    ok, msg, message, dbg = encrypt_message(plaintext, key_text, wide=wide)
    if ok:
        st.session_state["last_message"] = message
        st.session_state["last_plaintext"] = plaintext
        st.success(msg)
        st.code(dbg)
    else:
        st.error(msg)

message = st.session_state.get("last_message")
if message:
    params = message.params
    st.markdown("### Tabla")
    padded = pad_plaintext(st.session_state.get("last_plaintext", ""), params.padding_length)
    st.code(render_grid(build_grid(padded, params.num_cols, params.num_rows), params.num_cols))
    st.markdown("### Ciphertext")
    st.code(message.ciphertext or "(vacío)")
    st.json(params.model_dump())

    # Persistencia local del ciphertext junto a sus parámetros.
    name = st.text_input("Nombre del mensaje", key="enc_name")
    if st.button("Guardar", disabled=not name, key="btn_store"):
        try:
            path = store_message(name, message)
        except ValueError as exc:
            st.error(str(exc))
        else:
            st.success(f"Guardado en: {path}")
