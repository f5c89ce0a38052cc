import logging

from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import IdentifierTokenObtainPairSerializer, RegisterSerializer, UserSerializer

log = logging.getLogger(__name__)


class TokenObtainView(APIView):
    permission_classes = (permissions.AllowAny,)
    authentication_classes = ()

    def post(self, request):
        serializer = IdentifierTokenObtainPairSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        log.info('Login ok for user id=%s', serializer.validated_data['user']['id'])
        return Response(serializer.validated_data, status=status.HTTP_200_OK)


class RegisterView(generics.CreateAPIView):
    serializer_class = RegisterSerializer
    permission_classes = (permissions.AllowAny,)
    authentication_classes = ()

    def perform_create(self, serializer):
        user = serializer.save()
        log.info('Registered user id=%s role=%s', user.id, user.role)


class MeView(APIView):
    permission_classes = (permissions.IsAuthenticated,)

    def get(self, request):
        return Response(UserSerializer(request.user).data)
