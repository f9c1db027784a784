# -*- coding: utf-8 -*-
"""
Translation dictionaries for English, German and Portuguese.

This module contains all translatable strings for the Time Manager core.
"""

TRANSLATIONS = {
    "en": {
        # Application

        # Tasks
        "tasks.priority.low": "Low",
        "tasks.priority.medium": "Medium",
        "tasks.priority.high": "High",
        "tasks.none": "No tasks yet",

        # Timer
        "timer.generic_activity": "Activity",

        # Finance
        "finance.income": "Income",
        "finance.expense": "Expense",
        "finance.balance": "Balance",

        # Categories
        "categories.empty": "No categories defined - add one above.",

        # Summary report
        "report.title": "Dashboard Summary",
        "report.today": "Logged today",
        "report.active_tasks": "Active tasks",
        "report.recent_tasks": "Recent tasks",
        "report.monthly": "Last {count} months",
        "report.categories": "Categories",
        "report.minutes": "{minutes} min",
    },
    "de": {
        # Application

        # Tasks
        "tasks.priority.low": "Niedrig",
        "tasks.priority.medium": "Mittel",
        "tasks.priority.high": "Hoch",
        "tasks.none": "Noch keine Aufgaben",

        # Timer
        "timer.generic_activity": "Aktivität",

        # Finance
        "finance.income": "Einnahmen",
        "finance.expense": "Ausgaben",
        "finance.balance": "Kontostand",

        # Categories
        "categories.empty": "Keine Kategorien definiert - oben eine hinzufügen.",

        # Summary report
        "report.title": "Übersicht",
        "report.today": "Heute erfasst",
        "report.active_tasks": "Offene Aufgaben",
        "report.recent_tasks": "Neueste Aufgaben",
        "report.monthly": "Letzte {count} Monate",
        "report.categories": "Kategorien",
        "report.minutes": "{minutes} Min.",
    },
    "pt": {
        # Application

        # Tasks
        "tasks.priority.low": "Baixa",
        "tasks.priority.medium": "Média",
        "tasks.priority.high": "Alta",
        "tasks.none": "Nenhuma tarefa ainda",

        # Timer
        "timer.generic_activity": "Atividade",

        # Finance
        "finance.income": "Receita",
        "finance.expense": "Despesa",
        "finance.balance": "Saldo",

        # Categories
        "categories.empty": "Nenhuma categoria definida - adicione uma acima.",

        # Summary report
        "report.title": "Resumo do painel",
        "report.today": "Registrado hoje",
        "report.active_tasks": "Tarefas ativas",
        "report.recent_tasks": "Tarefas recentes",
        "report.monthly": "Últimos {count} meses",
        "report.categories": "Categorias",
        "report.minutes": "{minutes} min",
    },
}
