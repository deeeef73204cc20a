"""Built-in residential construction guide.

Ordered from project planning to handover.  Step ids are stable: the budget
merge table keys on them, so renaming an id requires updating
:data:`chantier.budget.tables.MERGE_MAP` as well.
"""

from __future__ import annotations

from chantier.catalog.models import Phase, Step, Task


def _step(step_id: str, title: str, phase: Phase, *task_titles: str) -> Step:
    tasks = tuple(
        Task(id=f"{step_id}-{index}", title=task_title)
        for index, task_title in enumerate(task_titles, start=1)
    )
    return Step(id=step_id, title=title, phase=phase, tasks=tasks)


CONSTRUCTION_STEPS: tuple[Step, ...] = (
    # ── Préparation ───────────────────────────────────────────────────────────
    _step(
        "planification", "Planification du projet", Phase.PREPARATION,
        "Définir les besoins", "Établir le budget préliminaire", "Choisir le terrain",
    ),
    _step(
        "financement", "Financement", Phase.PREPARATION,
        "Préautorisation hypothécaire", "Prêt construction", "Assurance chantier",
    ),
    _step(
        "plans-permis", "Plans et permis", Phase.PREPARATION,
        "Plans d'architecte", "Étude géotechnique", "Permis de construction",
    ),
    _step(
        "soumissions", "Soumissions et entrepreneurs", Phase.PREPARATION,
        "Demander les soumissions", "Comparer les soumissions", "Signer les contrats",
    ),
    # ── Gros oeuvre ───────────────────────────────────────────────────────────
    _step(
        "excavation", "Excavation", Phase.GROS_OEUVRE,
        "Implantation", "Excavation du sol", "Drain français", "Remblai",
    ),
    _step(
        "fondation", "Fondation", Phase.GROS_OEUVRE,
        "Semelles", "Murs de fondation", "Imperméabilisation", "Dalle de béton",
    ),
    _step(
        "structure", "Structure et charpente", Phase.GROS_OEUVRE,
        "Plancher", "Murs porteurs", "Fermes de toit", "Contreventement",
    ),
    _step(
        "toiture", "Toiture", Phase.GROS_OEUVRE,
        "Pontage", "Membrane", "Bardeaux", "Solins et ventilation",
    ),
    _step(
        "fenetres-portes", "Fenêtres et portes extérieures", Phase.GROS_OEUVRE,
        "Installation des fenêtres", "Portes extérieures", "Porte de garage",
    ),
    _step(
        "revetement-exterieur", "Revêtement extérieur", Phase.GROS_OEUVRE,
        "Pare-air", "Revêtement", "Soffites et fascias", "Gouttières",
    ),
    # ── Second oeuvre ─────────────────────────────────────────────────────────
    _step(
        "plomberie-roughin", "Plomberie brute", Phase.SECOND_OEUVRE,
        "Entrée d'eau", "Drainage", "Alimentation",
    ),
    _step(
        "electricite-roughin", "Électricité brute", Phase.SECOND_OEUVRE,
        "Entrée électrique", "Panneau", "Filage",
    ),
    _step(
        "hvac", "Chauffage et ventilation (HVAC)", Phase.SECOND_OEUVRE,
        "Système de chauffage", "Échangeur d'air", "Conduits",
    ),
    _step(
        "isolation", "Isolation et pare-vapeur", Phase.SECOND_OEUVRE,
        "Isolation des murs", "Isolation de l'entretoit", "Pare-vapeur", "Insonorisation",
    ),
    # ── Finitions ─────────────────────────────────────────────────────────────
    _step(
        "gypse-peinture", "Gypse et peinture", Phase.FINITIONS,
        "Pose du gypse", "Tirage de joints", "Apprêt", "Peinture",
    ),
    _step(
        "revetements-sol", "Revêtements de sol", Phase.FINITIONS,
        "Plancher de bois", "Céramique", "Plinthes",
    ),
    _step(
        "ebenisterie", "Travaux ébénisterie (Cuisine/SDB)", Phase.FINITIONS,
        "Armoires de cuisine", "Comptoirs", "Vanités de salle de bain",
    ),
    _step(
        "electricite-finition", "Électricité finition", Phase.FINITIONS,
        "Prises et interrupteurs", "Luminaires",
    ),
    _step(
        "plomberie-finition", "Plomberie finition", Phase.FINITIONS,
        "Appareils sanitaires", "Robinetterie", "Chauffe-eau",
    ),
    _step(
        "finitions-interieures", "Finitions intérieures", Phase.FINITIONS,
        "Portes intérieures", "Moulures", "Escaliers et rampes",
    ),
    _step(
        "inspections-finales", "Inspections finales", Phase.FINITIONS,
        "Inspection municipale", "Inspection du bâtiment", "Liste des déficiences",
    ),
    # ── Finalisation ──────────────────────────────────────────────────────────
    _step(
        "amenagement-exterieur", "Aménagement extérieur", Phase.FINALISATION,
        "Terrassement final", "Entrée de garage", "Gazon",
    ),
    _step(
        "remise-cles", "Remise des clés", Phase.FINALISATION,
        "Nettoyage final", "Documents de garantie", "Réception des travaux",
    ),
)
