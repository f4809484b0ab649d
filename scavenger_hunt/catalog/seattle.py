'''
The fixed Seattle scavenger hunt: 24 activities across 10 categories.
'''

from scavenger_hunt.catalog.catalog import ActivityCatalog
from scavenger_hunt.models.activity import Activity, Category, Difficulty

SEATTLE_ACTIVITIES = (
    # === Iconic Landmarks ===
    Activity(
        id=1,
        name='Space Needle Summit',
        description="Seattle's most iconic landmark offering 360-degree views of the city",
        category=Category.ICONIC_LANDMARKS,
        location='400 Broad St, Seattle, WA 98109',
        coordinates='47.6205,-122.3493',
        challenge='Take a selfie with the Space Needle in the background from Kerry Park',
        points=50,
        difficulty=Difficulty.EASY,
        time_estimate='1-2 hours',
        tips=('Best views at sunset', 'Book tickets in advance', 'Visit the gift shop'),
        photo_challenge='Capture the Space Needle with Mount Rainier in the background',
    ),
    Activity(
        id=2,
        name='Pike Place Market Adventure',
        description="The world's oldest continuously operating public market",
        category=Category.ICONIC_LANDMARKS,
        location='85 Pike St, Seattle, WA 98101',
        coordinates='47.6097,-122.3331',
        challenge='Find the original Starbucks and watch the fish throwing at Pike Place Fish',
        points=40,
        difficulty=Difficulty.EASY,
        time_estimate='2-3 hours',
        tips=('Visit early to avoid crowds', 'Try the famous clam chowder', 'Look for the gum wall'),
        photo_challenge='Get a photo with the famous fish-throwing vendors',
    ),
    Activity(
        id=3,
        name='Seattle Great Wheel',
        description='Waterfront Ferris wheel with stunning city and water views',
        category=Category.ICONIC_LANDMARKS,
        location='1301 Alaskan Way, Seattle, WA 98101',
        coordinates='47.6080,-122.3375',
        challenge='Ride the Great Wheel and spot 3 different Seattle landmarks',
        points=30,
        difficulty=Difficulty.EASY,
        time_estimate='30-45 minutes',
        tips=('Best views on clear days', 'Ride at sunset for amazing photos', 'Check for special events'),
        photo_challenge='Take a photo from the top of the wheel showing the city skyline',
    ),
    # === Art & Culture ===
    Activity(
        id=4,
        name='Olympic Sculpture Park',
        description='Outdoor sculpture park with works by renowned artists',
        category=Category.ART_CULTURE,
        location='2901 Western Ave, Seattle, WA 98121',
        coordinates='47.6163,-122.3556',
        challenge="Find the 'Eagle' sculpture by Alexander Calder and take a creative photo",
        points=35,
        difficulty=Difficulty.MEDIUM,
        time_estimate='1-2 hours',
        tips=('Free admission', 'Great for walking', 'Beautiful waterfront views', 'Bring a camera'),
        photo_challenge='Create an artistic photo with one of the sculptures and the water',
    ),
    Activity(
        id=5,
        name='Chihuly Garden and Glass',
        description='Stunning glass art installations by Dale Chihuly',
        category=Category.ART_CULTURE,
        location='305 Harrison St, Seattle, WA 98109',
        coordinates='47.6201,-122.3511',
        challenge="Find the 'Glasshouse' installation and count how many glass pieces you can see",
        points=45,
        difficulty=Difficulty.MEDIUM,
        time_estimate='1-2 hours',
        tips=('Book tickets online', 'Visit during golden hour', "Don't miss the garden"),
        photo_challenge='Capture the colorful glass art with natural lighting',
    ),
    Activity(
        id=6,
        name='Seattle Art Museum',
        description='Premier art museum featuring diverse collections',
        category=Category.ART_CULTURE,
        location='1300 1st Ave, Seattle, WA 98101',
        coordinates='47.6075,-122.3369',
        challenge="Find the 'Hammering Man' sculpture and learn about its significance",
        points=40,
        difficulty=Difficulty.MEDIUM,
        time_estimate='2-3 hours',
        tips=('Free first Thursday', 'Check current exhibitions', 'Visit the gift shop'),
        photo_challenge='Take a photo with the Hammering Man sculpture',
    ),
    # === Unique Neighborhoods ===
    Activity(
        id=7,
        name='Fremont Troll Hunt',
        description='Find the famous troll sculpture under the Aurora Bridge',
        category=Category.NEIGHBORHOODS,
        location='N 36th St, Seattle, WA 98103',
        coordinates='47.6509,-122.3473',
        challenge="Take a photo with the troll and find the real Volkswagen Beetle it's holding",
        points=35,
        difficulty=Difficulty.EASY,
        time_estimate='30 minutes',
        tips=('Park nearby and walk', 'Great for kids', 'Visit nearby shops', 'Check out the Sunday market'),
        photo_challenge='Get a creative photo with the troll from an unusual angle',
    ),
    Activity(
        id=8,
        name='Capitol Hill Arts Walk',
        description="Explore Seattle's most vibrant arts district",
        category=Category.NEIGHBORHOODS,
        location='Capitol Hill, Seattle, WA',
        coordinates='47.6205,-122.3212',
        challenge='Find 3 different murals or street art pieces and photograph them',
        points=40,
        difficulty=Difficulty.MEDIUM,
        time_estimate='2-3 hours',
        tips=('Best on weekends', 'Visit local cafes', 'Check out vintage shops', 'Look for hidden art'),
        photo_challenge='Create a collage of 3 different street art pieces',
    ),
    # === Historical Sites ===
    Activity(
        id=9,
        name='Pioneer Square Underground Tour',
        description="Explore Seattle's hidden underground tunnels",
        category=Category.HISTORICAL,
        location='614 1st Ave, Seattle, WA 98104',
        coordinates='47.6021,-122.3337',
        challenge='Take the underground tour and find the original street level markers',
        points=60,
        difficulty=Difficulty.HARD,
        time_estimate='1.5 hours',
        tips=('Book in advance', 'Wear comfortable shoes', 'Great for history buffs', 'Check tour times'),
        photo_challenge='Capture the contrast between old and new Seattle',
    ),
    Activity(
        id=10,
        name='Klondike Gold Rush Museum',
        description="Learn about Seattle's role in the gold rush",
        category=Category.HISTORICAL,
        location='319 2nd Ave S, Seattle, WA 98104',
        coordinates='47.6006,-122.3331',
        challenge='Find the gold panning demonstration and try your hand at it',
        points=30,
        difficulty=Difficulty.EASY,
        time_estimate='1 hour',
        tips=('Free admission', 'Interactive exhibits', 'Great for families', 'Check hours'),
        photo_challenge='Take a photo with the gold rush artifacts',
    ),
    # === Natural Attractions ===
    Activity(
        id=11,
        name='Kerry Park Skyline View',
        description="The best viewpoint for Seattle's skyline",
        category=Category.NATURE,
        location='211 W Highland Dr, Seattle, WA 98119',
        coordinates='47.6304,-122.3583',
        challenge='Capture the perfect Seattle skyline photo with Mount Rainier visible',
        points=50,
        difficulty=Difficulty.MEDIUM,
        time_estimate='1 hour',
        tips=('Best at sunset', 'Limited parking', 'Popular spot', 'Bring a tripod'),
        photo_challenge='Get the iconic Seattle skyline shot with Space Needle and Mount Rainier',
    ),
    Activity(
        id=12,
        name='Ballard Locks Engineering Marvel',
        description='Watch boats navigate between Puget Sound and Lake Union',
        category=Category.NATURE,
        location='3015 NW 54th St, Seattle, WA 98107',
        coordinates='47.6681,-122.3962',
        challenge='Watch a boat go through the locks and spot the salmon ladder',
        points=35,
        difficulty=Difficulty.EASY,
        time_estimate='1-2 hours',
        tips=('Free to visit', 'Best during salmon season', 'Great for kids', 'Check the fish ladder'),
        photo_challenge='Capture a boat going through the locks',
    ),
    Activity(
        id=13,
        name='Seattle Japanese Garden',
        description='Serene traditional Japanese garden in the heart of the city',
        category=Category.NATURE,
        location='1075 Lake Washington Blvd E, Seattle, WA 98112',
        coordinates='47.5847,-122.3019',
        challenge='Find the koi pond and count the different colored fish',
        points=30,
        difficulty=Difficulty.EASY,
        time_estimate='1-2 hours',
        tips=('Small admission fee', 'Best in spring/fall', 'Peaceful setting', 'Photography allowed'),
        photo_challenge='Capture the reflection of the garden in the koi pond',
    ),
    # === Culinary Delights ===
    Activity(
        id=14,
        name='Pike Place Chowder Quest',
        description="Find and taste Seattle's famous clam chowder",
        category=Category.FOOD,
        location='1530 Post Alley, Seattle, WA 98101',
        coordinates='47.6097,-122.3331',
        challenge='Try the award-winning clam chowder and find the secret ingredient',
        points=40,
        difficulty=Difficulty.EASY,
        time_estimate='1 hour',
        tips=('Long lines but worth it', 'Try the bread bowl', 'Check their awards', 'Take photos'),
        photo_challenge='Get a photo with your chowder and the market in the background',
    ),
    Activity(
        id=15,
        name='Uwajimaya Market Adventure',
        description="Explore Seattle's premier Asian supermarket",
        category=Category.FOOD,
        location='600 5th Ave S, Seattle, WA 98104',
        coordinates='47.5981,-122.3281',
        challenge="Find 3 unique items you've never seen before and try one",
        points=35,
        difficulty=Difficulty.MEDIUM,
        time_estimate='1-2 hours',
        tips=('Great for unique snacks', 'Try the food court', 'Check out the bookstore', 'Look for seasonal items'),
        photo_challenge='Take a photo with the most interesting item you found',
    ),
    Activity(
        id=16,
        name='Seattle Coffee Culture',
        description='Visit the original Starbucks and discover local roasters',
        category=Category.FOOD,
        location='1912 Pike Pl, Seattle, WA 98101',
        coordinates='47.6097,-122.3331',
        challenge='Compare the original Starbucks with a local Seattle roastery',
        points=45,
        difficulty=Difficulty.MEDIUM,
        time_estimate='2-3 hours',
        tips=('Original Starbucks is small', 'Try local roasters', 'Check out the coffee museum', 'Take the coffee tour'),
        photo_challenge='Get a photo with your coffee at both locations',
    ),
    # === Spooky Spots ===
    Activity(
        id=17,
        name='Kells Irish Pub Ghost Hunt',
        description='Visit the former mortuary turned pub with ghostly history',
        category=Category.SPOOKY,
        location='1916 Post Alley, Seattle, WA 98101',
        coordinates='47.6097,-122.3331',
        challenge='Order a drink and listen for ghost stories from the staff',
        points=50,
        difficulty=Difficulty.MEDIUM,
        time_estimate='1-2 hours',
        tips=('Great atmosphere', 'Ask about the history', 'Try the Irish food', 'Check for ghost tours'),
        photo_challenge='Take a photo in the most atmospheric corner of the pub',
    ),
    Activity(
        id=18,
        name='Hotel Sorrento Investigation',
        description='Explore the haunted reputation of this historic hotel',
        category=Category.SPOOKY,
        location='900 Madison St, Seattle, WA 98104',
        coordinates='47.6101,-122.3297',
        challenge='Take a photo in the lobby and see if you can spot anything unusual',
        points=40,
        difficulty=Difficulty.MEDIUM,
        time_estimate='1 hour',
        tips=('Beautiful historic hotel', 'Ask about ghost stories', 'Check out the bar', 'Look for paranormal activity'),
        photo_challenge='Capture the historic elegance of the hotel lobby',
    ),
    # === Outdoor Adventures ===
    Activity(
        id=19,
        name='Discovery Park Lighthouse Hike',
        description="Hike to Seattle's only lighthouse with stunning views",
        category=Category.OUTDOOR,
        location='3801 Discovery Park Blvd, Seattle, WA 98199',
        coordinates='47.6624,-122.4060',
        challenge='Hike to the lighthouse and spot 5 different types of birds',
        points=60,
        difficulty=Difficulty.HARD,
        time_estimate='2-3 hours',
        tips=('Wear good walking shoes', 'Bring water', 'Check tide times', 'Great for photography'),
        photo_challenge='Capture the lighthouse with the Olympic Mountains in the background',
    ),
    Activity(
        id=20,
        name='Gas Works Park Sunset',
        description='Watch the sunset from this unique park with industrial history',
        category=Category.OUTDOOR,
        location='2101 N Northlake Way, Seattle, WA 98103',
        coordinates='47.6458,-122.3360',
        challenge='Find the best spot to watch the sunset and capture the city skyline',
        points=45,
        difficulty=Difficulty.MEDIUM,
        time_estimate='1-2 hours',
        tips=('Popular sunset spot', 'Great for picnics', 'Check the weather', 'Bring a blanket'),
        photo_challenge='Get the perfect sunset shot with the city skyline',
    ),
    # === Hidden Gems ===
    Activity(
        id=21,
        name='Gum Wall Discovery',
        description="Find Seattle's famous (and sticky) gum wall",
        category=Category.HIDDEN_GEMS,
        location='Post Alley, Seattle, WA 98101',
        coordinates='47.6097,-122.3331',
        challenge='Find the gum wall and add your own piece (safely!)',
        points=25,
        difficulty=Difficulty.EASY,
        time_estimate='30 minutes',
        tips=("It's sticky!", 'Great for photos', 'Check nearby shops', 'Look for the market'),
        photo_challenge='Take a creative photo with the colorful gum wall',
    ),
    Activity(
        id=22,
        name='Seattle Central Library Architecture',
        description='Marvel at the unique architecture of this modern library',
        category=Category.HIDDEN_GEMS,
        location='1000 4th Ave, Seattle, WA 98104',
        coordinates='47.6082,-122.3321',
        challenge="Find the 'Red Floor' and take a photo in the unique reading room",
        points=35,
        difficulty=Difficulty.MEDIUM,
        time_estimate='1-2 hours',
        tips=('Free to visit', 'Amazing architecture', 'Check out the book spiral', 'Great for photos'),
        photo_challenge='Capture the unique geometric patterns of the library interior',
    ),
    # === Waterfront Wonders ===
    Activity(
        id=23,
        name='Seattle Aquarium Marine Life',
        description='Discover the underwater world of the Pacific Northwest',
        category=Category.WATERFRONT,
        location='1483 Alaskan Way, Seattle, WA 98101',
        coordinates='47.6080,-122.3375',
        challenge='Find the giant Pacific octopus and learn about its intelligence',
        points=40,
        difficulty=Difficulty.EASY,
        time_estimate='2-3 hours',
        tips=('Great for families', 'Check feeding times', 'Interactive exhibits', 'Gift shop'),
        photo_challenge='Get a photo with the sea otters or octopus',
    ),
    Activity(
        id=24,
        name='Alki Beach Walk',
        description="Walk along Seattle's most popular beach with city views",
        category=Category.WATERFRONT,
        location='1702 Alki Ave SW, Seattle, WA 98116',
        coordinates='47.5805,-122.4090',
        challenge='Walk the entire beach and spot 3 different types of boats',
        points=35,
        difficulty=Difficulty.EASY,
        time_estimate='1-2 hours',
        tips=('Great for walking', 'Check the weather', 'Look for sea life', 'Visit the lighthouse'),
        photo_challenge='Capture the beach with the Seattle skyline in the distance',
    ),
)

_CATALOG = ActivityCatalog(SEATTLE_ACTIVITIES)


def seattle_catalog() -> ActivityCatalog:
    return _CATALOG
