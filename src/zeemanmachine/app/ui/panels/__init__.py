from zeemanmachine.app.ui.panels.options import OptionsPanel
