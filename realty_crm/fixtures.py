"""Hand-written sample records for a Ho Chi Minh City sales office.

Each function returns fresh instances so stores can mutate them freely.
"""

from datetime import datetime

from realty_crm.models import (
    Coordinates,
    Customer,
    CustomerStatus,
    Direction,
    FeatureCategory,
    LegalStatus,
    Location,
    Priority,
    Project,
    ProjectStatus,
    ProjectType,
    Property,
    PropertyFeature,
    PropertyImage,
    PropertyStatus,
    PropertyType,
)

HCMC = "TP. Hồ Chí Minh"


def fixture_customers() -> list[Customer]:
    return [
        Customer(
            id="1",
            name="Nguyễn Văn An",
            email="nguyenvanan@gmail.com",
            phone="0901234567",
            company="Công ty ABC",
            position="Giám đốc",
            address="Quận 1, TP. Hồ Chí Minh",
            status=CustomerStatus.LEAD,
            priority=Priority.HIGH,
            source="Facebook",
            notes="Quan tâm đến dự án căn hộ cao cấp",
            total_value=5_000_000_000,
            tags=["VIP", "Căn hộ"],
            created_at=datetime(2024, 1, 15),
            updated_at=datetime(2024, 1, 20),
            last_contacted_at=datetime(2024, 1, 18),
        ),
        Customer(
            id="2",
            name="Trần Thị Bình",
            email="tranthibinh@yahoo.com",
            phone="0912345678",
            company="Công ty XYZ",
            position="Trưởng phòng",
            address="Quận 7, TP. Hồ Chí Minh",
            status=CustomerStatus.PROSPECT,
            priority=Priority.MEDIUM,
            source="Google Ads",
            notes="Đang tìm hiểu về nhà phố liền kề",
            total_value=3_000_000_000,
            tags=["Nhà phố", "Gia đình"],
            created_at=datetime(2024, 1, 10),
            updated_at=datetime(2024, 1, 19),
            last_contacted_at=datetime(2024, 1, 17),
        ),
        Customer(
            id="3",
            name="Lê Minh Cường",
            email="leminhcuong@outlook.com",
            phone="0923456789",
            address="Quận Tân Bình, TP. Hồ Chí Minh",
            status=CustomerStatus.CUSTOMER,
            priority=Priority.HIGH,
            source="Giới thiệu",
            notes="Đã mua căn hộ 3PN, quan tâm đầu tư thêm",
            total_value=8_000_000_000,
            tags=["Đầu tư", "Căn hộ", "VIP"],
            created_at=datetime(2024, 1, 5),
            updated_at=datetime(2024, 1, 21),
            last_contacted_at=datetime(2024, 1, 19),
        ),
        Customer(
            id="4",
            name="Phạm Thị Dung",
            email="phamthidung@gmail.com",
            phone="0934567890",
            company="Startup DEF",
            position="Co-founder",
            address="Quận 2, TP. Hồ Chí Minh",
            status=CustomerStatus.LEAD,
            priority=Priority.LOW,
            source="Zalo",
            notes="Quan tâm đến văn phòng nhỏ",
            total_value=1_500_000_000,
            tags=["Văn phòng", "Startup"],
            created_at=datetime(2024, 1, 12),
            updated_at=datetime(2024, 1, 16),
        ),
        Customer(
            id="5",
            name="Hoàng Văn Em",
            email="hoangvanem@hotmail.com",
            phone="0945678901",
            company="Ngân hàng GHI",
            position="Chuyên viên",
            address="Quận 9, TP. Hồ Chí Minh",
            status=CustomerStatus.INACTIVE,
            priority=Priority.LOW,
            source="Website",
            notes="Đã liên hệ nhưng không phản hồi",
            total_value=0,
            tags=["Không phản hồi"],
            created_at=datetime(2024, 1, 8),
            updated_at=datetime(2024, 1, 14),
            last_contacted_at=datetime(2024, 1, 12),
        ),
    ]


def fixture_properties() -> list[Property]:
    return [
        Property(
            id="1",
            title="Căn hộ cao cấp Vinhomes Central Park 3PN",
            description="Căn hộ 3 phòng ngủ, 2 phòng tắm với view sông Sài Gòn tuyệt đẹp. "
            "Nội thất cao cấp, đầy đủ tiện ích.",
            property_type=PropertyType.APARTMENT,
            status=PropertyStatus.AVAILABLE,
            price=8_500_000_000,
            area=100.0,
            bedrooms=3,
            bathrooms=2,
            floors=1,
            year_built=2020,
            location=Location(
                address="208 Nguyễn Hữu Cảnh, Phường 22",
                district="Bình Thạnh",
                city=HCMC,
                ward="Phường 22",
                coordinates=Coordinates(lat=10.7880, lng=106.7130),
            ),
            features=[
                PropertyFeature("Điều hòa", FeatureCategory.INTERIOR, "Daikin inverter"),
                PropertyFeature("Nội thất", FeatureCategory.INTERIOR, "Cao cấp"),
                PropertyFeature("Ban công", FeatureCategory.EXTERIOR, "View sông"),
            ],
            amenities=["Hồ bơi", "Gym", "Sân tennis", "Thang máy cao tốc", "An ninh 24/7"],
            direction=Direction.SOUTH,
            legal_status=LegalStatus.RED_BOOK,
            images=[
                PropertyImage("/images/property1-1.jpg", order=1, is_primary=True, title="Phòng khách"),
                PropertyImage("/images/property1-2.jpg", order=2, title="Phòng ngủ master"),
                PropertyImage("/images/property1-3.jpg", order=3, title="Nhà bếp"),
            ],
            owner_name="Nguyễn Văn Minh",
            owner_phone="0901234567",
            owner_email="minh.nguyen@email.com",
            agent_name="Trần Thị Lan",
            slug="can-ho-vinhomes-central-park-3pn",
            priority=Priority.HIGH,
            featured=True,
            views=1250,
            favorites=48,
            inquiries=23,
            last_contacted_at=datetime(2024, 1, 20),
            created_at=datetime(2024, 1, 15),
            updated_at=datetime(2024, 1, 21),
            published_at=datetime(2024, 1, 16),
        ),
        Property(
            id="2",
            title="Nhà phố liền kề Melosa Garden Q.9 (5x20m)",
            description="Nhà phố 3 tầng, thiết kế hiện đại, sân vườn rộng rãi. "
            "Khu vực an ninh, nhiều tiện ích.",
            property_type=PropertyType.TOWNHOUSE,
            status=PropertyStatus.AVAILABLE,
            price=7_200_000_000,
            area=100.0,
            bedrooms=4,
            bathrooms=3,
            floors=3,
            year_built=2023,
            location=Location(
                address="Đường Nguyễn Xiển, Phường Long Thạnh Mỹ",
                district="Quận 9",
                city=HCMC,
                ward="Phường Long Thạnh Mỹ",
                coordinates=Coordinates(lat=10.8411, lng=106.8071),
            ),
            amenities=["Công viên trung tâm", "Trường học quốc tế", "Siêu thị", "Bệnh viện"],
            direction=Direction.EAST,
            legal_status=LegalStatus.RED_BOOK,
            owner_name="Lê Hoài Nam",
            owner_phone="0912345678",
            agent_name="Trần Thị Lan",
            slug="nha-pho-melosa-garden-q9",
            priority=Priority.MEDIUM,
            featured=False,
            views=890,
            favorites=32,
            inquiries=18,
            created_at=datetime(2024, 1, 10),
            updated_at=datetime(2024, 1, 19),
            published_at=datetime(2024, 1, 12),
        ),
        Property(
            id="3",
            title="Biệt thự đơn lập Riviera Point Q.7 (10x20m)",
            description="Biệt thự cao cấp 3 tầng + tum, sân vườn rộng, hồ bơi riêng. "
            "Nội thất nhập khẩu.",
            property_type=PropertyType.VILLA,
            status=PropertyStatus.AVAILABLE,
            price=25_000_000_000,
            area=200.0,
            bedrooms=5,
            bathrooms=4,
            floors=4,
            year_built=2019,
            location=Location(
                address="74-76 Nguyễn Lương Bằng, Tân Phú",
                district="Quận 7",
                city=HCMC,
                ward="Phường Tân Phú",
            ),
            amenities=["Club house", "Sân tennis", "Playground", "Marina", "Spa"],
            direction=Direction.SOUTHEAST,
            legal_status=LegalStatus.RED_BOOK,
            owner_name="Phạm Minh Tuấn",
            owner_phone="0923456789",
            owner_email="tuan.pham@email.com",
            slug="biet-thu-riviera-point-q7",
            priority=Priority.URGENT,
            featured=True,
            views=2100,
            favorites=95,
            inquiries=67,
            last_contacted_at=datetime(2024, 1, 21),
            created_at=datetime(2024, 1, 8),
            updated_at=datetime(2024, 1, 21),
            published_at=datetime(2024, 1, 9),
        ),
        Property(
            id="4",
            title="Đất nền KDC Saigon Mystery Villas Q.2",
            description="Lô đất góc 2 mặt tiền, vị trí đẹp, thích hợp xây biệt thự hoặc đầu tư.",
            property_type=PropertyType.LAND,
            status=PropertyStatus.AVAILABLE,
            price=12_000_000_000,
            area=150.0,
            location=Location(
                address="Đường Nguyễn Cơ Thạch, Phường An Lợi Đông",
                district="Quận 2",
                city=HCMC,
                ward="Phường An Lợi Đông",
            ),
            amenities=["Điện 3 pha", "Nước máy", "Cáp quang", "Đường nhựa"],
            legal_status=LegalStatus.RED_BOOK,
            owner_name="Vũ Thị Hằng",
            owner_phone="0934567890",
            slug="dat-nen-saigon-mystery-villas-q2",
            priority=Priority.MEDIUM,
            featured=False,
            views=560,
            favorites=28,
            inquiries=12,
            created_at=datetime(2024, 1, 12),
            updated_at=datetime(2024, 1, 18),
            published_at=datetime(2024, 1, 14),
        ),
        Property(
            id="5",
            title="Mặt bằng kinh doanh Nguyễn Trãi Q.1",
            description="Mặt bằng tầng trệt, vị trí đắc địa, thích hợp kinh doanh F&B, thời trang.",
            property_type=PropertyType.SHOP,
            status=PropertyStatus.AVAILABLE,
            price=150_000_000,  # Monthly rent
            area=80.0,
            location=Location(
                address="125 Nguyễn Trãi, Phường Bến Thành",
                district="Quận 1",
                city=HCMC,
                ward="Phường Bến Thành",
            ),
            amenities=["Điện 3 pha", "Nước máy", "Internet", "Bảo vệ 24/7"],
            legal_status=LegalStatus.PINK_BOOK,
            owner_name="Đặng Văn Hùng",
            owner_phone="0945678901",
            slug="mat-bang-nguyen-trai-q1",
            priority=Priority.HIGH,
            featured=True,
            views=1800,
            favorites=75,
            inquiries=45,
            created_at=datetime(2024, 1, 5),
            updated_at=datetime(2024, 1, 20),
            published_at=datetime(2024, 1, 7),
        ),
    ]


def fixture_projects() -> list[Project]:
    return [
        Project(
            id="1",
            name="Vinhomes Central Park",
            description="Khu đô thị phức hợp cao cấp tại trung tâm TP.HCM với nhiều tiện ích đẳng cấp",
            developer="Tập đoàn Vingroup",
            status=ProjectStatus.COMPLETED,
            project_type=ProjectType.MIXED,
            location=Location(
                address="Nguyễn Hữu Cảnh, Bình Thạnh",
                district="Bình Thạnh",
                city=HCMC,
                coordinates=Coordinates(lat=10.7880, lng=106.7130),
            ),
            total_area=26_000_000,
            total_units=12500,
            available_units=850,
            price_min=5_000_000_000,
            price_max=20_000_000_000,
            amenities=["Công viên Trung tâm 14ha", "Trung tâm thương mại", "Trường học quốc tế"],
            property_ids=["1"],
            featured=True,
            views=15000,
            inquiries=450,
            expected_completion=datetime(2025, 12, 31),
            created_at=datetime(2024, 1, 1),
            updated_at=datetime(2024, 1, 20),
        ),
        Project(
            id="2",
            name="Melosa Garden",
            description="Khu đô thị sinh thái tại Quận 9 với thiết kế xanh và tiện ích đầy đủ",
            developer="Khang Điền",
            status=ProjectStatus.CONSTRUCTION,
            project_type=ProjectType.RESIDENTIAL,
            location=Location(
                address="Nguyễn Xiển, Quận 9",
                district="Quận 9",
                city=HCMC,
                coordinates=Coordinates(lat=10.8411, lng=106.8071),
            ),
            total_area=5_200_000,
            total_units=2000,
            available_units=1200,
            price_min=4_000_000_000,
            price_max=12_000_000_000,
            amenities=["Công viên cây xanh", "Hồ bơi", "Sân chơi trẻ em"],
            property_ids=["2"],
            featured=True,
            views=8500,
            inquiries=280,
            expected_completion=datetime(2025, 6, 30),
            created_at=datetime(2024, 1, 5),
            updated_at=datetime(2024, 1, 18),
        ),
    ]
