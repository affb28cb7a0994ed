# --------------------------------------------------------------
# File: 2_Descifrar.py
# Description: Recupera mensajes guardados y los descifra desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from api.services import MESSAGES_DIR, decrypt_message, list_messages, load_message
from core.rendering import render_decrypt_view, render_grid
from core.transposition import decrypt_grid, split_groups

# Presenta el título de la sección orientada a la restauración.
st.title("🔓 Descifrar")

st.write("Carpeta de mensajes:", f"`{MESSAGES_DIR}`")

names = list_messages()
if not names:
    st.info("No hay mensajes guardados aún. Ve a **Cifrar** para añadir alguno.")
    st.stop()

sel = st.selectbox("Selecciona un mensaje:", names, index=0)
message = load_message(sel)
if message is None:
    st.error("No se ha podido leer el mensaje seleccionado.")
    st.stop()

params = message.params
st.markdown("### Parámetros")
st.json(params.model_dump())
st.code(message.ciphertext or "(vacío)")

if st.button("Descifrar", key="btn_decrypt"):
    ok, msg, plaintext, dbg = decrypt_message(message)
    if not ok:
        st.error(msg)
        st.code(dbg)
        st.stop()

    # Muestra los grupos del ciphertext y la columna de destino de cada uno.
    groups = split_groups(message.ciphertext, params.num_cols, params.num_rows)
    st.markdown("### Grupos")
    st.code(render_decrypt_view(groups, params.key))
    grid = decrypt_grid(message.ciphertext, params.key, params.num_cols, params.num_rows)
    st.markdown("### Tabla reconstruida")
    st.code(render_grid(grid, params.num_cols))

    st.success(msg)
    st.write("**Plain Text:**", plaintext)
    st.code(dbg)
