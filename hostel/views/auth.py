from dj_rest_auth.views import LoginView as DjRestAuthLoginView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny
from django.views.decorators.csrf import csrf_exempt
from django.utils.decorators import method_decorator
from hostel.serializers import UserSerializer


@method_decorator(csrf_exempt, name='dispatch')
class LoginView(DjRestAuthLoginView):
    """
    Username/password login that returns the user's profile.
    CSRF exempt to allow anyone to attempt login
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def get_response(self):
        data = {
            'detail': 'Login successful',
            'user': UserSerializer(self.user).data,
        }
        token = getattr(self, 'token', None)
        if token is not None:
            data['key'] = token.key

        return Response(data, status=200)
