from django import forms
from django.core.validators import MinLengthValidator, RegexValidator
from .models import UserProfile

username_validators = [
    MinLengthValidator(3, message="Username must have at least 3 letters."),
    RegexValidator(r'^([a-z\-]+)$', message="Username may only contain letters and hyphens."),
]


class UsernameField(forms.CharField):
    """Litery i myślniki, min. 3 znaki, zawsze małymi literami."""

    def __init__(self, **kwargs):
        kwargs.setdefault('max_length', 150)
        kwargs.setdefault('widget', forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'your-username'}))
        super().__init__(**kwargs)

    def to_python(self, value):
        value = super().to_python(value)
        return value.lower() if value else value

    def validate(self, value):
        super().validate(value)
        for validator in username_validators:
            validator(value)


class ClaimUsernameForm(forms.Form):
    username = UsernameField()


class RegisterForm(forms.Form):
    username = UsernameField()
    name = forms.CharField(
        max_length=255,
        min_length=3,
        error_messages={'min_length': "Name must have at least 3 letters."},
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Your name'})
    )


class UserProfileForm(forms.ModelForm):
    class Meta:
        model = UserProfile
        fields = ['bio']
        widgets = {
            'bio': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
        }
