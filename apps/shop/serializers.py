from rest_framework import serializers

from .models import ShopItem


class ShopItemSerializer(serializers.ModelSerializer):

    class Meta:
        model = ShopItem
        fields = [
            'id',
            'name',
            'description',
            'category',
            'price',
            'image_url',
            'store_url',
            'created_at',
        ]
        read_only_fields = fields
