# -*- coding: utf-8 -*-
"""
Biochar Tracker UI Components

Import components from their modules, e.g.:

    from ui.components.wizard_footer import WizardNavigation
"""
