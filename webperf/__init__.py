"""Single-page website performance analyzer."""
