# apps/requirements/forms.py
from django import forms
from .models import RequirementRecord


class RequirementCreateForm(forms.Form):
    worker_id = forms.IntegerField(min_value=1)
    requirement_type_id = forms.IntegerField(min_value=1)
    valid_from = forms.DateField()
    valid_to = forms.DateField()
    link = forms.URLField(required=False)


class RequirementUpdateForm(forms.Form):
    valid_from = forms.DateField()
    valid_to = forms.DateField()
    # Pusta wartość = usuń ręczny status (wraca klasyfikacja z dat)
    manual_status = forms.ChoiceField(
        choices=[('', '---')] + list(RequirementRecord.StatusChoices.choices),
        required=False
    )
    link = forms.URLField(required=False)
