"""Default item category tree seeded on a fresh database."""

ROOT_CATEGORY = {
    "key": "cat_ROOT",
    "name": "ROOT",
    "description": "root item category",
    "children": [
        {
            "key": "cat_high_value",
            "name": "High Value (10,000$+)",
            "description": "",
            "children": [
                {"key": "cat_high_business_corporate", "name": "Business/Corporate", "description": ""},
                {"key": "cat_high_vehicles_aircraft_yachts", "name": "Vehicles/Aircraft/Yachts and Water Craft", "description": ""},
                {"key": "cat_high_real_estate", "name": "Real Estate", "description": ""},
                {"key": "cat_high_luxyry_items", "name": "Luxury Items", "description": ""},
                {"key": "cat_high_services", "name": "Services", "description": ""},
            ],
        },
        {
            "key": "cat_housing_travel_vacation",
            "name": "Housing, Travel & Vacation",
            "description": "",
            "children": [
                {"key": "cat_housing_vacation_rentals", "name": "Vacation Rentals", "description": ""},
                {"key": "cat_housing_travel_services", "name": "Travel Services", "description": ""},
                {"key": "cat_housing_apartments_rental_housing", "name": "Apartments/Rental Housing", "description": ""},
            ],
        },
        {
            "key": "cat_apparel_accessories",
            "name": "Apparel & Accessories",
            "description": "",
            "children": [
                {"key": "cat_apparel_adult", "name": "Adult", "description": ""},
                {"key": "cat_apparel_children", "name": "Children", "description": ""},
                {"key": "cat_apparel_bags_luggage", "name": "Bags & Luggage", "description": ""},
                {"key": "cat_apparel_other", "name": "Other", "description": ""},
            ],
        },
        {
            "key": "cat_electronics",
            "name": "Electronics and Technology",
            "description": "",
            "children": [
                {"key": "cat_electronics_home_audio", "name": "Home Audio", "description": ""},
                {"key": "cat_electronics_music_instruments", "name": "Music Instruments and Accessories", "description": ""},
                {"key": "cat_electronics_automation_security", "name": "Home Automation and Security", "description": ""},
                {"key": "cat_electronics_video_camera", "name": "Video & Camera", "description": ""},
                {"key": "cat_electronics_television_monitors", "name": "Television & Monitors", "description": ""},
                {"key": "cat_electronics_computers_parts", "name": "Computers & Parts", "description": ""},
                {"key": "cat_electronics_gaming_esports", "name": "Gaming and E-Sports", "description": ""},
                {"key": "cat_electronics_cell_phones_mobile", "name": "Cell Phones and Mobile Devices", "description": ""},
                {"key": "cat_electronics_other", "name": "Other", "description": ""},
            ],
        },
        {
            "key": "cat_home_kitchen",
            "name": "Home and Kitchen",
            "description": "",
            "children": [
                {"key": "cat_home_furniture", "name": "Furniture", "description": ""},
                {"key": "cat_home_appliances_kitchenware", "name": "Appliances & Kitchenware", "description": ""},
                {"key": "cat_home_textiles_rugs_bedding", "name": "Textiles, Rugs & Bedding", "description": ""},
                {"key": "cat_home_hardware_tools", "name": "Hardware and Tools", "description": ""},
                {"key": "cat_home_pet_supplies", "name": "Pet Supplies", "description": ""},
                {"key": "cat_home_other", "name": "Other", "description": ""},
            ],
        },
        {
            "key": "cat_wholesale_science_industrial",
            "name": "Wholesale, Science & Industrial Products",
            "description": "",
            "children": [
                {"key": "cat_wholesale_consumer_goods", "name": "Wholesale Consumer Goods", "description": ""},
                {"key": "cat_wholesale_commercial_industrial", "name": "Wholesale Commercial/Industrial Goods", "description": ""},
                {"key": "cat_wholesale_scientific_equipment_supplies", "name": "Scientific Equipment and Supplies", "description": ""},
                {"key": "cat_wholesale_other", "name": "Other", "description": ""},
            ],
        },
    ],
}
