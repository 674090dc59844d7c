"""Well-known names of external types, properties and namespaces."""

# Marker interface implemented by every Avalonia control.
CONTROL_INTERFACE = "Avalonia.Controls.IControl"

# The x: namespace of the markup language.
XAML2006_NAMESPACE = "http://schemas.microsoft.com/winfx/2006/xaml"

FIELD_MODIFIER_DIRECTIVE = "FieldModifier"
NAME_PROPERTY = "Name"
