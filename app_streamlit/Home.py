# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Tabular TC", page_icon="🔢", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔢 Tabular TC")
st.write(
    "Cifrado de transposición columnar: el texto se escribe por filas en una tabla "
    "y se lee por columnas en el orden que marca la clave."
)
st.warning("Es un cifrado didáctico: no ofrece seguridad criptográfica real.")
st.info("Ve a **Cifrar** para generar un mensaje y a **Descifrar** para recuperarlo.")
