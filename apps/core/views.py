import json
import logging
from django.conf import settings
from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth.decorators import login_required
from django.contrib.auth.models import User
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from google_auth_oauthlib.flow import Flow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error
from .adapters.google_profile import GoogleProfileAdapter
from .adapters.orm_repositories import DjangoUserRepository, GoogleCredentialsRepository
from .application.use_cases import RegisterUserInput, RegisterUserUseCase, UsernameAlreadyExists
from .domain.scopes import has_calendar_scope
from .forms import ClaimUsernameForm, RegisterForm, UserProfileForm

logger = logging.getLogger(__name__)


def _build_flow(state=None, code_verifier=None) -> Flow:
    client_config = {
        'web': {
            'client_id': settings.GOOGLE_CLIENT_ID,
            'client_secret': settings.GOOGLE_CLIENT_SECRET,
            'auth_uri': settings.GOOGLE_AUTH_URI,
            'token_uri': settings.GOOGLE_TOKEN_URI,
        }
    }
    return Flow.from_client_config(
        client_config,
        scopes=settings.GOOGLE_SCOPES,
        state=state,
        redirect_uri=settings.GOOGLE_REDIRECT_URI,
        code_verifier=code_verifier,
    )


def _set_user_cookie(response, user_id):
    response.set_cookie(
        settings.USER_ID_COOKIE,
        str(user_id),
        max_age=settings.USER_ID_COOKIE_MAX_AGE,
        path='/',
    )
    return response


def _resolve_user(request):
    """User z sesji, a jeśli go nie ma - z ciasteczka ustawionego przy rejestracji."""
    if request.user.is_authenticated:
        return request.user

    user_id = request.COOKIES.get(settings.USER_ID_COOKIE, '')
    if not user_id.isdigit():
        return None
    return User.objects.filter(id=int(user_id)).first()


def home_view(request):
    """Strona główna: rezerwacja nazwy użytkownika."""
    if request.method == 'POST':
        form = ClaimUsernameForm(request.POST)
        if form.is_valid():
            username = form.cleaned_data['username']
            return redirect(f"{reverse('register')}?username={username}")
    else:
        form = ClaimUsernameForm()

    return render(request, 'core/home.html', {'form': form})


def register_view(request):
    """Krok 1 rejestracji: nazwa użytkownika + imię."""
    if request.method == 'POST':
        form = RegisterForm(request.POST)
        if form.is_valid():
            use_case = RegisterUserUseCase(DjangoUserRepository())
            try:
                user = use_case.execute(RegisterUserInput(
                    username=form.cleaned_data['username'],
                    name=form.cleaned_data['name'],
                ))
            except UsernameAlreadyExists as e:
                form.add_error('username', str(e))
            else:
                return _set_user_cookie(redirect('connect_calendar'), user.id)
    else:
        form = RegisterForm(initial={'username': request.GET.get('username', '')})

    return render(request, 'core/register.html', {'form': form, 'current_step': 1})


@csrf_exempt
@require_http_methods(["POST"])
def users_api(request):
    if request.content_type == 'application/json':
        try:
            payload = json.loads(request.body or b'{}')
        except ValueError:
            return JsonResponse({'message': 'Invalid JSON body'}, status=400)
        if not isinstance(payload, dict):
            return JsonResponse({'message': 'Invalid JSON body'}, status=400)
    else:
        payload = request.POST

    form = RegisterForm(payload)
    if not form.is_valid():
        errors = {
            field: [e['message'] for e in field_errors]
            for field, field_errors in form.errors.get_json_data().items()
        }
        return JsonResponse({'message': 'Invalid data', 'errors': errors}, status=400)

    use_case = RegisterUserUseCase(DjangoUserRepository())
    try:
        user = use_case.execute(RegisterUserInput(
            username=form.cleaned_data['username'],
            name=form.cleaned_data['name'],
        ))
    except UsernameAlreadyExists as e:
        return JsonResponse({'message': str(e)}, status=400)

    return _set_user_cookie(JsonResponse(user.to_dict(), status=201), user.id)


def connect_calendar_view(request):
    """Krok 2 rejestracji: połączenie z Google Calendar."""
    user = _resolve_user(request)
    is_connected = bool(user) and GoogleCredentialsRepository().exists_for_user(user.id)

    return render(request, 'core/connect_calendar.html', {
        'has_permission_error': request.GET.get('error') == 'permissions',
        'is_connected': is_connected,
        'current_step': 2,
    })


def google_login(request):
    flow = _build_flow()

    authorization_url, state = flow.authorization_url(
        access_type='offline',
        include_granted_scopes='true',
        prompt='consent'  # Wymuś ekran zgody, żeby dostać refresh token
    )

    request.session['google_auth_state'] = state
    request.session['google_code_verifier'] = flow.code_verifier
    return redirect(authorization_url)


def google_callback(request):
    permissions_error = f"{reverse('connect_calendar')}?error=permissions"

    # Stan i verifier są jednorazowe
    state = request.session.pop('google_auth_state', None)
    code_verifier = request.session.pop('google_code_verifier', None)
    if state is None or request.GET.get('error'):
        return redirect(permissions_error)

    flow = _build_flow(state=state, code_verifier=code_verifier)
    try:
        flow.fetch_token(authorization_response=request.build_absolute_uri())
    except OAuth2Error as e:
        logger.warning("Google token exchange failed: %s", e.error)
        return redirect(permissions_error)
    creds = flow.credentials

    granted = flow.oauth2session.token.get('scope')
    if not has_calendar_scope(granted):
        logger.warning("Google login without calendar scope (granted: %s)", granted)
        return redirect(permissions_error)

    user = _resolve_user(request)
    if user is None:
        return redirect('register')

    GoogleCredentialsRepository().save(user.id, creds)

    google_profile = GoogleProfileAdapter().get_profile(creds)
    if google_profile:
        profile = user.profile
        profile.email = google_profile.email
        profile.avatar_url = google_profile.avatar_url
        if not profile.name:
            profile.name = google_profile.name
        profile.save()

    login(request, user, backend='django.contrib.auth.backends.ModelBackend')
    logger.info("Connected Google Calendar for user %s", user.username)
    return redirect('time_intervals')


@login_required
def update_profile_view(request):
    """Krok 4 rejestracji: krótki opis (bio)."""
    profile = request.user.profile

    if request.method == 'POST':
        form = UserProfileForm(request.POST, instance=profile)
        if form.is_valid():
            form.save()
            messages.success(request, "Profile updated.")
            return redirect('schedule', username=request.user.username)
    else:
        form = UserProfileForm(instance=profile)

    return render(request, 'core/update_profile.html', {
        'form': form,
        'profile': profile,
        'current_step': 4,
    })
