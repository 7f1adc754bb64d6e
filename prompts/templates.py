"""Prompt templates for landing page generation."""

from __future__ import annotations

from string import Template

from core.models import Style

# --- Style instructions ---

STYLE_INSTRUCTIONS: dict[Style, str] = {
    Style.MODERN: (
        "Usa un diseño limpio, con mucho espacio en blanco, una tipografía sans-serif "
        "moderna (como Inter o Manrope), y una paleta de colores primarios brillantes con "
        "un color de acento. Incluye una sección de héroe con un titular grande y un botón "
        "de llamada a la acción claro."
    ),
    Style.ELEGANT: (
        "Usa un diseño sofisticado con una tipografía serif (como Playfair Display o Lora), "
        "colores oscuros o neutros (negro, gris, beige), e imágenes de alta calidad. "
        "El diseño debe ser simétrico y ordenado, transmitiendo lujo."
    ),
    Style.BOLD: (
        "Usa un diseño asimétrico, colores vibrantes o degradados, tipografías grandes y "
        "audaces (display fonts), y micro-interacciones o animaciones sutiles si es posible "
        "con CSS. Debe ser visualmente impactante y memorable."
    ),
}

# --- Landing page prompt ---

LANDING_PAGE_PROMPT = Template(
    "Tu tarea es actuar como un experto diseñador y desarrollador web frontend.\n"
    "Genera el código HTML y CSS completo para una landing page de un solo archivo "
    "(inline CSS en etiquetas <style>) para el siguiente negocio: \"$description\".\n"
    "\n"
    "REQUISITOS ESTRICTOS:\n"
    "1. **Estilo de Diseño**: $style_instructions\n"
    "2. **Sin Archivos Externos**: No uses enlaces a archivos CSS o JS externos. "
    "Todo el CSS debe estar dentro de una etiqueta <style> en el <head>.\n"
    "3. **Imágenes**: Usa placeholders de https://placehold.co/ para las imágenes. "
    "No uses imágenes de otros sitios.\n"
    "4. **Contenido**: El texto debe estar en español y ser relevante para el negocio descrito.\n"
    "5. **Salida Limpia**: Responde ÚNICAMENTE con el código HTML. No incluyas explicaciones, "
    "comentarios, ni la palabra \"HTML\" o ```html. "
    "La respuesta debe empezar directamente con \"<!DOCTYPE html>\".\n"
)

# --- Fallback page for a generation that came back empty ---

ERROR_PLACEHOLDER_HTML = (
    "<html><body><p>Error al generar este diseño. "
    "Por favor, intente de nuevo.</p></body></html>"
)
