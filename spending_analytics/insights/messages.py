"""
Wording for every insight, kept apart from the decision tables so that
rules can be tested without depending on copy.
"""
from __future__ import annotations

from typing import Optional

from ..dates import language_code

MESSAGES = {
    "es": {
        # thirds
        "thirds.no_data": "No hay gastos registrados en este período.",
        "thirds.insufficient_data.current": "Hasta hoy, aún no hay suficientes datos para ver cómo se reparte tu gasto.",
        "thirds.insufficient_data.previous": "En {month}, no hubo suficientes datos para ver cómo se repartió tu gasto.",
        "thirds.note.one_day": "Este análisis se basa en gastos registrados en un solo día.",
        "thirds.note.few_days": "Este análisis se basa en pocos días con registro.",
        "thirds.bimodal.current": "Hasta hoy, tu gasto se concentra {peaks}.",
        "thirds.bimodal.previous": "En {month}, tu gasto se concentró {peaks}.",
        "thirds.concentrated.current": "Hasta hoy, la mayor parte del gasto se concentra en el {third}.",
        "thirds.concentrated.previous": "En {month}, gastaste principalmente {timing}.",
        "thirds.spread.current": "Hasta hoy, tu gasto ha estado bastante repartido a lo largo del mes.",
        "thirds.spread.previous": "En {month}, tu gasto estuvo bastante repartido en el tiempo.",
        "thirds.gray.current": "Hasta hoy, tu gasto se inclina ligeramente hacia el {third}, sin una concentración clara.",
        "thirds.gray.previous": "En {month}, tu gasto se inclinó ligeramente hacia el {third}, sin una concentración clara.",
        "thirds.name.T1": "primer tercio",
        "thirds.name.T2": "segundo tercio",
        "thirds.name.T3": "tercer tercio",
        "thirds.timing.T1": "al inicio del mes",
        "thirds.timing.T2": "a mitad de mes",
        "thirds.timing.T3": "hacia el final del mes",
        # peaks are named by the lowest third
        "thirds.peaks.T1": "a mitad y al final del mes",
        "thirds.peaks.T2": "al inicio y al final del mes",
        "thirds.peaks.T3": "al inicio y a mitad de mes",
        # pace
        "pace.no_calculable": "No se pudo interpretar el ritmo del mes.",
        "pace.no_calculable.note": "Revisa que exista data suficiente para {month}.",
        "pace.no_reference.current": "Este mes llevas un promedio diario de {avg}.",
        "pace.no_reference.previous": "En {month} tu promedio diario fue de {avg}.",
        "pace.no_reference.note": "Cuando tengas más meses registrados, podrás ver si tu gasto va contenido, normal o acelerado.",
        "pace.status.current": "Este mes tu gasto está siendo {status}: {comparison} tu referencia de {months}.",
        "pace.status.previous": "En {month} tu gasto fue {status}: {comparison} tu referencia de {months}.",
        "pace.comparison.above": "{pct} por encima de",
        "pace.comparison.below": "{pct} por debajo de",
        "pace.comparison.flat": "en línea con",
        "pace.months.one": "1 mes",
        "pace.months.many": "{count} meses",
        "pace.status.contenido": "contenido",
        "pace.status.normal": "normal",
        "pace.status.acelerado": "acelerado",
        # month summary
        "summary.no_data": "Este mes aún no tienes gastos registrados. Registra al menos 1 para ver tu resumen.",
        "summary.as_of": "A hoy {date}: {total}",
        "summary.top": "Top: {label} {amount} ({pct})",
        "summary.rank": "{rank}) {label} {amount} ({pct})",
        "summary.top3": "Top 3: {pct}",
        # monthly evolution
        "evolution.current_label": "Último mes cerrado",
        "evolution.prev_label": "mes anterior",
    },
    "en": {
        "thirds.no_data": "No expenses recorded in this period.",
        "thirds.insufficient_data.current": "So far, there is not enough data to see how your spending is spread.",
        "thirds.insufficient_data.previous": "In {month}, there was not enough data to see how your spending was spread.",
        "thirds.note.one_day": "This is based on expenses recorded on a single day.",
        "thirds.note.few_days": "This is based on only a few days with records.",
        "thirds.bimodal.current": "So far, your spending is concentrated {peaks}.",
        "thirds.bimodal.previous": "In {month}, your spending was concentrated {peaks}.",
        "thirds.concentrated.current": "So far, most of your spending is concentrated in the {third}.",
        "thirds.concentrated.previous": "In {month}, you spent mainly {timing}.",
        "thirds.spread.current": "So far, your spending has been fairly evenly spread across the month.",
        "thirds.spread.previous": "In {month}, your spending was fairly evenly spread over time.",
        "thirds.gray.current": "So far, your spending leans slightly towards the {third}, without a clear concentration.",
        "thirds.gray.previous": "In {month}, your spending leaned slightly towards the {third}, without a clear concentration.",
        "thirds.name.T1": "first third of the month",
        "thirds.name.T2": "second third of the month",
        "thirds.name.T3": "last third of the month",
        "thirds.timing.T1": "at the start of the month",
        "thirds.timing.T2": "mid-month",
        "thirds.timing.T3": "towards the end of the month",
        "thirds.peaks.T1": "in the middle and at the end of the month",
        "thirds.peaks.T2": "at the start and at the end of the month",
        "thirds.peaks.T3": "at the start and in the middle of the month",
        "pace.no_calculable": "The month's pace could not be interpreted.",
        "pace.no_calculable.note": "Check that there is enough data for {month}.",
        "pace.no_reference.current": "This month your daily average so far is {avg}.",
        "pace.no_reference.previous": "In {month} your daily average was {avg}.",
        "pace.no_reference.note": "Once you have more months recorded, you will see whether your spending is contained, normal or accelerated.",
        "pace.status.current": "This month your spending is {status}: {comparison} your {months} reference.",
        "pace.status.previous": "In {month} your spending was {status}: {comparison} your {months} reference.",
        "pace.comparison.above": "{pct} above",
        "pace.comparison.below": "{pct} below",
        "pace.comparison.flat": "in line with",
        "pace.months.one": "1-month",
        "pace.months.many": "{count}-month",
        "pace.status.contenido": "contained",
        "pace.status.normal": "normal",
        "pace.status.acelerado": "accelerated",
        "summary.no_data": "You have no expenses recorded this month yet. Record at least 1 to see your summary.",
        "summary.as_of": "As of {date}: {total}",
        "summary.top": "Top: {label} {amount} ({pct})",
        "summary.rank": "{rank}) {label} {amount} ({pct})",
        "summary.top3": "Top 3: {pct}",
        "evolution.current_label": "Last closed month",
        "evolution.prev_label": "previous month",
    },
}


def message(key: str, language: Optional[str] = None, **params) -> str:
    template = MESSAGES[language_code(language)][key]
    return template.format(**params) if params else template
